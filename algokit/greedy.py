"""Greedy choices over prices, intervals, jumps and allocations."""

from __future__ import annotations

from typing import List, Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from a single buy followed by a single sell."""
    if not prices:
        raise ValueError("max_profit() of an empty sequence")
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Return the best profit when any number of buy-sell trades is allowed."""
    return sum(max(0, later - earlier) for earlier, later in zip(prices, prices[1:]))


def assign_cookies(greed: Sequence[int], cookies: Sequence[int]) -> int:
    """Return how many children can be given a cookie at least as large as their greed."""
    children = sorted(greed)
    satisfied = 0
    for cookie in sorted(cookies):
        if satisfied == len(children):
            break
        if children[satisfied] <= cookie:
            satisfied += 1
    return satisfied


def min_candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so that each child gets one and beats lower-rated neighbours."""
    n = len(ratings)
    left = [1] * n
    right = [1] * n
    for i in range(1, n):
        if ratings[i] > ratings[i - 1]:
            left[i] = left[i - 1] + 1
    for i in range(n - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            right[i] = right[i + 1] + 1
    return sum(map(max, left, right))


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> List[List[int]]:
    """Insert an interval into sorted disjoint intervals, merging where they overlap."""
    start, end = new_interval
    result: List[List[int]] = []
    rest = iter(intervals)
    pending = None
    for interval in rest:
        if interval[1] < start:
            result.append(list(interval))
            continue
        pending = interval
        break
    while pending is not None and pending[0] <= end:
        start = min(start, pending[0])
        end = max(end, pending[1])
        pending = next(rest, None)
    result.append([start, end])
    if pending is not None:
        result.append(list(pending))
    result.extend(list(interval) for interval in rest)
    return result


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last index; raise if it cannot be reached."""
    last = len(nums) - 1
    jumps = 0
    left = right = 0
    while right < last:
        farthest = max(i + nums[i] for i in range(left, right + 1))
        if farthest <= right:
            raise ValueError("the last index cannot be reached")
        left, right = right + 1, farthest
        jumps += 1
    return jumps


def can_reach_end(arr: Sequence[int]) -> bool:
    """Return whether the last index is reachable from index 0."""
    reach = 0
    for i, step in enumerate(arr):
        if i > reach:
            return False
        reach = max(reach, i + step)
    return True


def fractional_knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Return the greedy knapsack value, taking items by value per weight.

    The item that no longer fits whole contributes its integer value per
    unit weight for each unit of remaining capacity.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")
    items = sorted(zip(values, weights), key=lambda item: item[0] / item[1], reverse=True)
    remaining = capacity
    total = 0
    for value, weight in items:
        if weight <= remaining:
            total += value
            remaining -= weight
        else:
            total += (value // weight) * remaining
            break
    return total


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return the fewest platforms needed so that no train waits."""
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    arrive = sorted(arrivals)
    depart = sorted(departures)
    i = j = 0
    current = best = 0
    while i < len(arrive):
        if arrive[i] <= depart[j]:
            current += 1
            i += 1
        else:
            current -= 1
            j += 1
        best = max(best, current)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> List[List[int]]:
    """Return the intervals sorted with overlapping ones merged."""
    merged: List[List[int]] = []
    for start, end in sorted(list(i) for i in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def _can_place(values: Sequence[int], k: int, gap: int) -> bool:
    count = 1
    last = values[0]
    for value in values[1:]:
        if value - last >= gap:
            count += 1
            last = value
            if count >= k:
                return True
    return False


def max_min_difference(arr: Sequence[int], k: int) -> int:
    """Return the largest possible smallest gap between k chosen elements."""
    if not arr:
        raise ValueError("max_min_difference() of an empty sequence")
    values = sorted(arr)
    low, high = 0, values[-1] - values[0]
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if _can_place(values, k, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best