import pytest

from dsakit.sequences import (
    bubble_sort,
    find_celebrity,
    max_subarray,
    missing_number,
    next_greater,
    next_smaller,
    selection_sort,
    stock_span,
    subarray_with_sum,
)

SAMPLE = [0, 50, 20, 5, 8, 5, 40]


@pytest.mark.parametrize("sort", [bubble_sort, selection_sort])
@pytest.mark.parametrize("values", [SAMPLE, [], [3], [5, 4, 3, 2, 1], [2, 2, 1, 1]])
def test_sorts_match_sorted(sort, values):
    assert sort(values) == sorted(values)


@pytest.mark.parametrize("sort", [bubble_sort, selection_sort])
def test_sorts_leave_input_untouched(sort):
    values = list(SAMPLE)
    sort(values)
    assert values == SAMPLE


def test_max_subarray_sample():
    values = [2, 3, -8, 7, -1, 2, 3]
    total, run = max_subarray(values)
    assert total == 11
    assert sum(run) == total
    assert run == values[3:]


def test_max_subarray_all_negative():
    total, run = max_subarray([-3, -1, -2])
    assert total == -1
    assert run == [-1]


def test_max_subarray_single():
    assert max_subarray([4]) == (4, [4])


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


@pytest.mark.parametrize("absent", range(1, 9))
def test_missing_number(absent):
    values = [n for n in range(1, 9) if n != absent]
    assert missing_number(values) == absent


def test_next_greater_increasing():
    assert next_greater([1, 2, 3, 4, 5]) == [2, 3, 4, 5, -1]


def test_next_greater_decreasing():
    assert next_greater([5, 4, 3]) == [-1, -1, -1]


def test_next_smaller_sample():
    assert next_smaller([4, 8, 5, 2, 25]) == [2, 5, 2, -1, -1]


@pytest.mark.parametrize("values", [[4, 8, 5, 2, 25], [3, 1, 4, 1, 5, 9, 2, 6]])
def test_next_smaller_invariant(values):
    result = next_smaller(values)
    assert len(result) == len(values)
    for i, found in enumerate(result):
        later = values[i + 1:]
        if found == -1:
            assert all(v >= values[i] for v in later)
        else:
            assert found < values[i]
            assert found in later


def test_stock_span_sample():
    assert stock_span([10, 4, 5, 90, 120, 80]) == [1, 1, 2, 4, 5, 1]


def test_stock_span_invariant():
    prices = [100, 80, 60, 70, 60, 75, 85]
    spans = stock_span(prices)
    for i, span in enumerate(spans):
        assert 1 <= span <= i + 1
        assert all(p <= prices[i] for p in prices[i - span + 1:i + 1])


def test_subarray_with_sum_found():
    values = [1, 2, 3, 7, 5]
    start, stop = subarray_with_sum(values, 12)
    assert sum(values[start:stop]) == 12


def test_subarray_with_sum_missing():
    assert subarray_with_sum([1, 2, 3], 100) is None


def test_celebrity_absent_when_everyone_knows_everyone():
    assert find_celebrity([[1, 1], [1, 1]]) is None


def test_celebrity_found():
    size = 4
    knows = [[1 if col == 2 and row != 2 else 0 for col in range(size)] for row in range(size)]
    assert find_celebrity(knows) == 2


def test_celebrity_empty():
    assert find_celebrity([]) is None