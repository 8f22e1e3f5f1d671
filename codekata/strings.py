"""Classic string algorithms."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def is_palindrome(s: str) -> bool:
    """Return True if the ASCII letters and digits of s read the same both ways, ignoring case."""
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def is_isomorphic(s: str, t: str) -> bool:
    """Return True if the characters of s can be consistently replaced to give t."""
    if len(s) != len(t):
        return False
    last_in_s: dict[str, int] = {}
    last_in_t: dict[str, int] = {}
    for position, (a, b) in enumerate(zip(s, t), start=1):
        if last_in_s.get(a, 0) != last_in_t.get(b, 0):
            return False
        last_in_s[a] = position
        last_in_t[b] = position
    return True


def is_anagram(s: str, t: str) -> bool:
    """Return True if t is a rearrangement of the characters of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        raise ValueError("strs must not be empty")
    ordered = sorted(strs)
    first, last = ordered[0], ordered[-1]
    prefix = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of needle in haystack, or -1."""
    return haystack.find(needle)


def _special_occurs_thrice(s: str, length: int) -> bool:
    counts: Counter[str] = Counter()
    run_start = 0
    for index, ch in enumerate(s):
        if ch != s[run_start]:
            run_start = index
        if index - run_start + 1 >= length:
            counts[ch] += 1
            if counts[ch] > 2:
                return True
    return False


def maximum_length(s: str) -> int:
    """Return the length of the longest single-character substring occurring at least thrice, or -1."""
    low, high = 1, len(s)
    if not _special_occurs_thrice(s, low):
        return -1
    while low + 1 < high:
        mid = (low + high) // 2
        if _special_occurs_thrice(s, mid):
            low = mid
        else:
            high = mid
    return low


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character {exc.args[0]!r}") from None
    total = 0
    for current, following in zip(values, [*values[1:], 0]):
        total += -current if current < following else current
    return total