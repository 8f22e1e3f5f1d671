"""Singly linked list node type and classic linked list algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A singly linked list node holding an integer value."""

    val: int = 0
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a new linked list holding the given values in order."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return True if following next pointers revisits a node."""
    seen: set[ListNode] = set()
    for node in _nodes(head):
        if node in seen:
            return True
        seen.add(node)
    return False


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new list holding the values in ascending order."""
    return from_values(sorted(to_values(head)))


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new list holding the values in ascending order."""
    return from_values(sorted(to_values(head)))


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node of list A that is also a node of list B."""
    in_b = set(_nodes(head_b))
    return next((node for node in _nodes(head_a) if node in in_b), None)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Return a new list without the n-th node counted from the end."""
    values = to_values(head)
    doomed = len(values) - n
    return from_values(value for index, value in enumerate(values) if index != doomed)


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new list holding the values in reverse order."""
    return from_values(reversed(to_values(head)))


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from list2 comes first.
    """
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_two_lists_copy(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Return a new sorted list holding the values of both lists."""
    return from_values(sorted(to_values(list1) + to_values(list2)))


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Return True if the list reads the same forwards and backwards."""
    values = to_values(head)
    return values == values[::-1]


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list k places to the right in place and return the new head."""
    if head is None or k == 0:
        return head
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    tail.next = head
    steps_to_new_head = length - k % length
    new_tail = head
    for _ in range(steps_to_new_head - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new list holding the values from the middle node to the end.

    With an even number of nodes the second middle node is used.
    """
    values = to_values(head)
    return from_values(values[len(values) // 2 :])


def reverse_between(head: Optional[ListNode], left: int, right: int) -> Optional[ListNode]:
    """Return a new list with positions left..right (1-based) reversed."""
    values = to_values(head)
    if not 1 <= left <= right <= len(values):
        raise ValueError(
            f"positions {left}..{right} are out of range for a list of {len(values)}"
        )
    values[left - 1 : right] = values[left - 1 : right][::-1]
    return from_values(values)