"""Classic integer puzzles."""

from __future__ import annotations

_INT_MAX = 2**31 - 1
_REVERSE_LIMIT = _INT_MAX // 10


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x, keeping its sign; 0 if the result overflows 32 bits."""
    sign = -1 if x < 0 else 1
    remaining = abs(x)
    result = 0
    while remaining:
        if result > _REVERSE_LIMIT:
            return 0
        remaining, digit = divmod(remaining, 10)
        result = result * 10 + digit
    return sign * result


def is_palindrome_number(x: int) -> bool:
    """Return True if x reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_power_of_two(n: int) -> bool:
    """Return True if n is a positive power of two."""
    return n >= 1 and n & (n - 1) == 0


def is_ugly(n: int) -> bool:
    """Return True if n is positive and has no prime factors other than 2, 3 and 5."""
    if n <= 0:
        return False
    for factor in (2, 3, 5):
        while n % factor == 0:
            n //= factor
    return n == 1


def the_maximum_achievable_x(num: int, t: int) -> int:
    """Return num + 2t, or 0 when either num or t is zero."""
    if t != 0 and num != 0:
        return num + t * 2
    return 0


def climb_stairs(n: int) -> int:
    """Return how many ways there are to climb n stairs taking 1 or 2 at a time."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return current