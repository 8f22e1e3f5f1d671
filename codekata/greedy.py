"""Greedy and sweep algorithms over prices, jumps, jobs, graphs and intervals."""

from __future__ import annotations

from operator import itemgetter
from typing import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_multi(prices: Sequence[int]) -> int:
    """Return the best profit when any number of buy/sell rounds is allowed."""
    if not prices:
        raise ValueError("prices must not be empty")
    return sum(max(later - earlier, 0) for earlier, later in zip(prices, prices[1:]))


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the station from which the circular route can be driven, or -1."""
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    if sum(cost) > sum(gas):
        return -1
    tank = 0
    start = 0
    for index, (fuel, needed) in enumerate(zip(gas, cost)):
        tank += fuel - needed
        if tank < 0:
            tank = 0
            start = index + 1
    return start


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps needed to reach the last index."""
    if not nums:
        raise ValueError("nums must not be empty")
    last = len(nums) - 1
    near = far = jumps = 0
    while far < last:
        farthest = max(
            index + step for index, step in enumerate(nums[near : far + 1], start=near)
        )
        if farthest <= far:
            raise ValueError("the last index cannot be reached")
        near, far = far + 1, farthest
        jumps += 1
    return jumps


def can_jump(nums: Sequence[int]) -> bool:
    """Return True if the last index can be reached from the first."""
    last = len(nums) - 1
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
        if reach >= last:
            return True
    return False


def _balls_placed(ordered: Sequence[int], distance: int) -> int:
    count = 1
    previous = ordered[0]
    for spot in ordered[1:]:
        if spot - previous >= distance:
            previous = spot
            count += 1
    return count


def max_distance(position: Sequence[int], m: int) -> int:
    """Return the largest minimum gap when placing m balls at the given positions."""
    if not position:
        raise ValueError("position must not be empty")
    ordered = sorted(position)
    left, right = 1, ordered[-1]
    while left + 1 < right:
        mid = (left + right) // 2
        if _balls_placed(ordered, mid) >= m:
            left = mid
        else:
            right = mid - 1
    return right if _balls_placed(ordered, right) >= m else left


def max_profit_assignment(
    difficulty: Sequence[int], profit: Sequence[int], worker: Sequence[int]
) -> int:
    """Return the total profit when each worker takes the best job they can do."""
    if len(difficulty) != len(profit):
        raise ValueError("difficulty and profit must have the same length")
    jobs = sorted(zip(difficulty, profit), key=itemgetter(0))
    total = 0
    best = 0
    index = 0
    for ability in sorted(worker):
        while index < len(jobs) and jobs[index][0] <= ability:
            best = max(best, jobs[index][1])
            index += 1
        total += best
    return total


def find_center(edges: Sequence[Sequence[int]]) -> int:
    """Return the node shared by every edge of a star graph."""
    if not edges:
        raise ValueError("edges must not be empty")
    for candidate in edges[0][:2]:
        if all(candidate in edge for edge in edges):
            return candidate
    raise ValueError("edges do not form a star graph")


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping [start, end] intervals and return them sorted."""
    if not intervals:
        raise ValueError("intervals must not be empty")
    ordered = sorted(list(interval) for interval in intervals)
    merged: list[list[int]] = []
    start, end = ordered[0]
    for low, high in ordered[1:]:
        if end < low:
            merged.append([start, end])
            start, end = low, high
        else:
            end = max(end, high)
    merged.append([start, end])
    return merged


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Add new_interval to intervals and merge the result."""
    return merge_intervals([*intervals, new_interval])


def find_min_arrow_shots(points: Sequence[Sequence[int]]) -> int:
    """Return the fewest vertical arrows that burst every [start, end] balloon."""
    if not points:
        raise ValueError("points must not be empty")
    ordered = sorted(points, key=itemgetter(1))
    arrows = 1
    arrow = ordered[0][1]
    for start, end in ordered[1:]:
        if start > arrow:
            arrow = end
            arrows += 1
    return arrows