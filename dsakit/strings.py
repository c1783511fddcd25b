"""String algorithms: rotations, subsequences, palindromes, words, brackets."""

from __future__ import annotations

from itertools import compress, product

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def is_rotation(first: str, second: str) -> bool:
    """True when ``second`` is a rotation of ``first``."""
    return len(first) == len(second) and second in first + first


def is_rotation_naive(first: str, second: str) -> bool:
    """True when some non-trivial cut of ``first`` rotates it into ``second``."""
    if len(first) != len(second):
        return False
    return any(
        first[cut:] + first[:cut] == second for cut in range(1, len(first) + 1)
    )


def subsets(text: str) -> list[str]:
    """Every subsequence of ``text`` (one per choice of positions), sorted."""
    return sorted(
        "".join(compress(text, mask))
        for mask in product((False, True), repeat=len(text))
    )


def longest_palindrome(text: str) -> str:
    """The first longest palindromic substring of ``text``."""
    size = len(text)
    start, length = 0, 1
    for centre in range(size):
        for offset in (0, 1):
            low, high = centre, centre + offset
            while low >= 0 and high < size and text[low] == text[high]:
                if high - low + 1 > length:
                    start, length = low, high - low + 1
                low -= 1
                high += 1
    return text[start:start + length]


def reverse_words(text: str) -> str:
    """Reverse the order of the space-separated words, keeping every space."""
    return " ".join(reversed(text.split(" ")))


def is_balanced(text: str) -> bool:
    """True when every character closes the bracket most recently opened.

    Any character other than an opening bracket counts as a closer.
    """
    opened: list[str] = []
    for char in text:
        if char in _OPENERS:
            opened.append(char)
        elif not opened or _CLOSERS.get(char) != opened.pop():
            return False
    return not opened