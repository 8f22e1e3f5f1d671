"""Classic array algorithms over lists of integers."""

from __future__ import annotations

import heapq
from collections import Counter
from functools import reduce
from itertools import accumulate
from operator import xor
from typing import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices [i, j] (i < j) of the first pair summing to target.

    Pairs are tried in order of i, then j. An empty list means no pair exists.
    """
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                return [i, j]
    return []


def relative_sort_array(arr1: Sequence[int], arr2: Sequence[int]) -> list[int]:
    """Order arr1 by the position of its values in arr2.

    Values absent from arr2 follow at the end in ascending order.
    """
    counts = Counter(arr1)
    result: list[int] = []
    for value in dict.fromkeys(arr2):
        result.extend([value] * counts.pop(value, 0))
    for value in sorted(counts):
        result.extend([value] * counts[value])
    return result


def running_sum(nums: Sequence[int]) -> list[int]:
    """Return the prefix sums of nums."""
    return list(accumulate(nums))


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return nums followed by a second copy of nums."""
    return [*nums, *nums]


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    if not nums:
        raise ValueError("nums must not be empty")
    return reduce(xor, nums)


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value appears more than once."""
    return len(set(nums)) != len(nums)


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Return True if equal values occur at indices at most k apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def majority_element(nums: Sequence[int]) -> int:
    """Return the most frequent value; on a tie, the one that got there first.

    An empty sequence yields 0.
    """
    counts: Counter[int] = Counter()
    best, best_count = 0, 0
    for value in nums:
        counts[value] += 1
        if counts[value] > best_count:
            best, best_count = value, counts[value]
    return best


def rotate(nums: list[int], k: int) -> None:
    """Rotate nums k places to the right in place."""
    if not nums:
        return
    split = len(nums) - k % len(nums)
    nums[:] = nums[split:] + nums[:split]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other elements."""
    prefix = [1, *accumulate(nums[:-1], lambda acc, x: acc * x, initial=1)][1:]
    suffix = [1, *accumulate(reversed(nums[1:]), lambda acc, x: acc * x, initial=1)][1:]
    suffix.reverse()
    return [left * right for left, right in zip(prefix, suffix)]


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list so each value appears once; return the new length.

    The first returned-length elements hold the result; the rest are left over.
    """
    if not nums:
        return 0
    length = 1
    for value in nums[1:]:
        if value != nums[length - 1]:
            nums[length] = value
            length += 1
    return length


def remove_duplicates_at_most_twice(nums: list[int]) -> int:
    """Compact a sorted list so each value appears at most twice; return the new length."""
    if len(nums) <= 2:
        return len(nums)
    length = 2
    for value in nums[2:]:
        if value != nums[length - 2]:
            nums[length] = value
            length += 1
    return length


def remove_element(nums: list[int], val: int) -> int:
    """Move every element not equal to val to the front; return how many there are."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def sort_colors(nums: list[int]) -> None:
    """Sort nums in place in ascending order."""
    nums.sort()


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first n values of nums2 into the first m values of nums1, in place.

    nums1 must have room for m + n values.
    """
    if len(nums1) < m + n:
        raise ValueError(f"nums1 has room for {len(nums1)} values, need {m + n}")
    if n == 0:
        return
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def search(nums: Sequence[int], target: int) -> int:
    """Return the first index of target in nums, or -1."""
    return next((index for index, value in enumerate(nums) if value == target), -1)


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as decimal digits, most significant first."""
    if not digits:
        raise ValueError("digits must not be empty")
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in nums."""
    if len(nums) < 2:
        return len(nums)
    ordered = sorted(set(nums))
    best = run = 1
    for previous, current in zip(ordered, ordered[1:]):
        run = run + 1 if current == previous + 1 else 1
        best = max(best, run)
    return best


def max_product_two(nums: Sequence[int]) -> int:
    """Return (a - 1) * (b - 1) for the two largest values a and b."""
    if len(nums) < 2:
        raise ValueError("nums needs at least two elements")
    first, second = heapq.nlargest(2, nums)
    return (first - 1) * (second - 1)


def maximum_product_three(nums: Sequence[int]) -> int:
    """Return the largest product of any three elements."""
    if len(nums) < 3:
        raise ValueError("nums needs at least three elements")
    top = heapq.nlargest(3, nums)
    bottom = heapq.nsmallest(2, nums)
    return max(top[0] * top[1] * top[2], bottom[0] * bottom[1] * top[0])


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Describe a sorted list of distinct integers as ranges like "0->2" or "7"."""
    result: list[str] = []
    if not nums:
        return result
    start = previous = nums[0]
    for value in [*nums[1:], None]:
        if value is None or value != previous + 1:
            result.append(str(start) if start == previous else f"{start}->{previous}")
            if value is not None:
                start = value
        if value is not None:
            previous = value
    return result


def _subarrays_with_at_most(nums: Sequence[int], k: int) -> int:
    odd = 0
    left = 0
    total = 0
    for right, value in enumerate(nums):
        odd += value % 2
        while odd > k:
            odd -= nums[left] % 2
            left += 1
        total += right - left + 1
    return total


def number_of_nice_subarrays(nums: Sequence[int], k: int) -> int:
    """Return how many contiguous subarrays hold exactly k odd numbers."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return _subarrays_with_at_most(nums, k) - _subarrays_with_at_most(nums, k - 1)


def h_index(citations: Sequence[int]) -> int:
    """Return the largest h such that h papers have at least h citations each."""
    ordered = sorted(citations)
    count = len(ordered)
    for index, cited in enumerate(ordered):
        if cited >= count - index:
            return count - index
    return 0


def maximum_beauty(nums: Sequence[int], k: int) -> int:
    """Return the most elements that can be made equal by moving each by at most k."""
    ordered = sorted(nums)
    best = 0
    left = 0
    for right, value in enumerate(ordered):
        while value - ordered[left] > 2 * k:
            left += 1
        best = max(best, right - left + 1)
    return best