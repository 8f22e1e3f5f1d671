"""A stack that reports its smallest element in constant time."""

from __future__ import annotations


class MinStack:
    """A stack of integers that tracks the minimum of its contents."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, val: int) -> None:
        """Push val onto the stack."""
        minimum = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, minimum))

    def pop(self) -> None:
        """Remove the top element; does nothing on an empty stack."""
        if self._entries:
            self._entries.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._entries:
            raise IndexError("top from empty stack")
        return self._entries[-1][0]

    def get_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1][1]