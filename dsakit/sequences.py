"""Algorithms over flat sequences of numbers."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable, Optional, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list, sorted by repeated adjacent swaps."""
    items = list(values)
    size = len(items)
    for done in range(size):
        for j in range(size - done - 1):
            if items[j + 1] < items[j]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list, sorted by selecting the minimum each pass."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def max_subarray(values: Iterable[int]) -> tuple[int, list[int]]:
    """Return the largest contiguous sum and the run that reaches it (Kadane)."""
    items = list(values)
    if not items:
        raise ValueError("max_subarray() needs at least one value")
    best = current = items[0]
    start = best_start = 0
    best_stop = 1
    for i, value in enumerate(items[1:], start=1):
        if value > current + value:
            current = value
            start = i
        else:
            current += value
        if current > best:
            best = current
            best_start, best_stop = start, i + 1
    return best, items[best_start:best_stop]


def missing_number(values: Iterable[int]) -> int:
    """Return the one number of 1..len+1 that is absent from ``values``."""
    items = list(values)
    return reduce(xor, items, 0) ^ reduce(xor, range(1, len(items) + 2), 0)


def next_greater(values: Sequence[int]) -> list[int]:
    """For each item, the first later item that is strictly greater, or -1."""
    items = list(values)
    result = [-1] * len(items)
    pending: list[int] = []
    for i, value in enumerate(items):
        while pending and items[pending[-1]] < value:
            result[pending.pop()] = value
        pending.append(i)
    return result


def next_smaller(values: Sequence[int]) -> list[int]:
    """For each item, the first later item that is strictly smaller, or -1."""
    items = list(values)
    result = [-1] * len(items)
    pending: list[int] = []
    for i, value in enumerate(items):
        while pending and items[pending[-1]] > value:
            result[pending.pop()] = value
        pending.append(i)
    return result


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, how many consecutive days up to it had a price not above it."""
    items = list(prices)
    spans: list[int] = []
    higher: list[int] = []
    for i, price in enumerate(items):
        while higher and price >= items[higher[-1]]:
            higher.pop()
        spans.append(i - higher[-1] if higher else i + 1)
        higher.append(i)
    return spans


def subarray_with_sum(values: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return ``(start, stop)`` of the first window of non-negative values summing
    to ``target``, or None when there is none."""
    items = list(values)
    start = 0
    total = 0
    for i, value in enumerate(items):
        total += value
        while start <= i and total > target:
            total -= items[start]
            start += 1
        if total == target:
            return start, i + 1
    return None


def find_celebrity(knows: Sequence[Sequence[int]]) -> Optional[int]:
    """Return the person everyone knows and who knows nobody, or None.

    ``knows[a][b]`` is truthy when ``a`` knows ``b``.
    """
    size = len(knows)
    if size == 0:
        return None
    candidates = list(range(size))
    while len(candidates) > 1:
        first = candidates.pop()
        second = candidates.pop()
        candidates.append(second if knows[first][second] else first)
    candidate = candidates[0]
    for person in range(size):
        if person == candidate:
            continue
        if not knows[person][candidate] or knows[candidate][person]:
            return None
    return candidate