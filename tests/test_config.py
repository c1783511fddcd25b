import copy

import pytest

from dsakit.config import GlobalConfig


def test_get_returns_same_instance():
    first = GlobalConfig.get()
    first.set_state(7, 8)
    second = GlobalConfig.get()
    assert second.state() == (7, 8)
    second.set_state(9, 10)
    assert first.state() == (9, 10)


def test_state_is_shared_between_handles():
    first = GlobalConfig.get()
    second = GlobalConfig.get()
    first.set_state(1, 2)
    assert second.state() == (1, 2)


def test_set_state_overwrites():
    config = GlobalConfig.get()
    config.set_state("a", "b")
    config.set_state("c", "d")
    assert config.state() == ("c", "d")


def test_direct_construction_is_refused():
    with pytest.raises(TypeError):
        GlobalConfig()