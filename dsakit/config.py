"""A process-wide configuration holder with a single shared instance."""

from __future__ import annotations

from typing import Any, Optional


class GlobalConfig:
    """Singleton holding one key/value pair; obtain it with ``get()``."""

    _instance: Optional["GlobalConfig"] = None

    def __init__(self) -> None:
        raise TypeError("GlobalConfig cannot be instantiated; use GlobalConfig.get()")

    @classmethod
    def get(cls) -> "GlobalConfig":
        """The one shared instance, created on first use."""
        if cls._instance is None:
            instance = object.__new__(cls)
            instance._key = None
            instance._value = None
            cls._instance = instance
        return cls._instance

    def set_state(self, key: Any, value: Any) -> None:
        """Store ``key`` and ``value``."""
        self._key = key
        self._value = value

    def state(self) -> tuple[Any, Any]:
        """The stored ``(key, value)`` pair."""
        return self._key, self._value

    def __copy__(self) -> "GlobalConfig":
        """Copying yields the shared instance, so there is never a second one."""
        return type(self).get()

    def __deepcopy__(self, memo: dict) -> "GlobalConfig":
        """Deep copying yields the shared instance as well."""
        shared = type(self).get()
        memo[id(self)] = shared
        return shared