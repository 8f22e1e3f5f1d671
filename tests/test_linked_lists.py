import pytest

from codekata.linked_lists import (
    ListNode,
    from_values,
    get_intersection_node,
    has_cycle,
    insertion_sort_list,
    is_palindrome_list,
    merge_two_lists,
    merge_two_lists_copy,
    middle_node,
    remove_nth_from_end,
    reverse_between,
    reverse_list,
    rotate_right,
    sort_list,
    to_values,
)

SAMPLES = [[], [1], [4, 2, 1, 3], [-1, 5, 3, 4, 0], [1, 2, 3, 4, 5], [2, 2, 1]]


def _nodes(head):
    result = []
    while head is not None:
        result.append(head)
        head = head.next
    return result


@pytest.mark.parametrize("values", SAMPLES)
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


def test_has_cycle():
    head = from_values([3, 2, 0, -4])
    assert not has_cycle(head)
    nodes = _nodes(head)
    nodes[-1].next = nodes[1]
    assert has_cycle(head)
    assert not has_cycle(None)


def test_self_loop_is_cycle():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node)


@pytest.mark.parametrize("values", SAMPLES)
def test_sorting_functions(values):
    assert to_values(insertion_sort_list(from_values(values))) == sorted(values)
    assert to_values(sort_list(from_values(values))) == sorted(values)


def test_get_intersection_node():
    shared = from_values([8, 4, 5])
    head_a = ListNode(4, ListNode(1, shared))
    head_b = ListNode(5, ListNode(6, ListNode(1, shared)))
    assert get_intersection_node(head_a, head_b) is shared


def test_no_intersection():
    assert get_intersection_node(from_values([2, 6, 4]), from_values([1, 5])) is None
    assert get_intersection_node(None, from_values([1])) is None


def test_remove_nth_from_end():
    assert to_values(remove_nth_from_end(from_values([1, 2, 3, 4, 5]), 2)) == [1, 2, 3, 5]
    assert remove_nth_from_end(from_values([1]), 1) is None
    assert to_values(remove_nth_from_end(from_values([1, 2]), 1)) == [1]


def test_remove_nth_out_of_range_keeps_list():
    assert to_values(remove_nth_from_end(from_values([1, 2, 3]), 7)) == [1, 2, 3]


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


def test_merge_two_lists_reuses_nodes():
    list1 = from_values([1, 2, 4])
    list2 = from_values([1, 3, 4])
    originals = {id(n) for n in _nodes(list1) + _nodes(list2)}
    merged = merge_two_lists(list1, list2)
    assert to_values(merged) == sorted([1, 2, 4] + [1, 3, 4])
    assert {id(n) for n in _nodes(merged)} == originals


def test_merge_two_lists_ties_take_second_first():
    first = ListNode(1)
    second = ListNode(1)
    assert merge_two_lists(first, second) is second


def test_merge_two_lists_with_empty():
    only = from_values([0])
    assert merge_two_lists(None, only) is only
    assert merge_two_lists(only, None) is only
    assert merge_two_lists(None, None) is None


def test_merge_two_lists_copy_leaves_inputs():
    list1 = from_values([5, 1])
    list2 = from_values([3])
    merged = merge_two_lists_copy(list1, list2)
    assert to_values(merged) == sorted([5, 1, 3])
    assert to_values(list1) == [5, 1]
    assert to_values(list2) == [3]


def test_is_palindrome_list():
    assert is_palindrome_list(from_values([1, 2, 2, 1]))
    assert not is_palindrome_list(from_values([1, 2]))
    assert is_palindrome_list(None)


def test_rotate_right_by_zero_or_length():
    head = from_values([1, 2, 3])
    assert rotate_right(head, 0) is head
    assert to_values(rotate_right(from_values([1, 2, 3]), 3)) == [1, 2, 3]
    assert rotate_right(None, 4) is None


def test_rotate_right_example():
    assert to_values(rotate_right(from_values([1, 2, 3, 4, 5]), 2)) == [4, 5, 1, 2, 3]


@pytest.mark.parametrize("k", [1, 2, 4])
def test_rotate_right_inverse_and_period(k):
    values = [1, 2, 3, 4, 5]
    rotated = rotate_right(from_values(values), k)
    assert to_values(rotate_right(rotated, len(values) - k)) == values
    assert to_values(rotate_right(from_values(values), k + len(values))) == to_values(
        rotate_right(from_values(values), k)
    )


def test_middle_node():
    assert to_values(middle_node(from_values([1, 2, 3, 4, 5]))) == [3, 4, 5]
    assert to_values(middle_node(from_values([1, 2, 3, 4, 5, 6]))) == [4, 5, 6]
    assert middle_node(None) is None


def test_reverse_between():
    assert to_values(reverse_between(from_values([1, 2, 3, 4, 5]), 2, 4)) == [1, 4, 3, 2, 5]
    assert to_values(reverse_between(from_values([5]), 1, 1)) == [5]


def test_reverse_between_whole_list_matches_reverse():
    values = [3, 1, 4, 1, 5]
    assert to_values(reverse_between(from_values(values), 1, len(values))) == to_values(
        reverse_list(from_values(values))
    )


@pytest.mark.parametrize("left, right", [(0, 2), (2, 6), (3, 2)])
def test_reverse_between_out_of_range(left, right):
    with pytest.raises(ValueError):
        reverse_between(from_values([1, 2, 3, 4, 5]), left, right)