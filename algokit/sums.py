"""Pair, triplet and subarray sums, products and counts over integer lists."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List, Sequence, Tuple


def two_sum_sorted(numbers: Sequence[int], target: int) -> Tuple[int, int]:
    """Return 1-based indices (i, j), i < j, of a pair summing to target in sorted numbers.

    Returns (-1, -1) when no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return left + 1, right + 1
        if total > target:
            right -= 1
        else:
            left += 1
    return -1, -1


def has_pair_with_sum(arr: Sequence[int], target: int) -> bool:
    """Return whether two distinct positions of arr hold values summing to target."""
    values = sorted(arr)
    left, right = 0, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False


def three_sum_zero(arr: Sequence[int]) -> List[List[int]]:
    """Return every distinct sorted triplet of arr summing to zero, in ascending order."""
    values = sorted(arr)
    n = len(values)
    result: List[List[int]] = []
    for i, first in enumerate(values):
        if i and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
    return result


def count_subarrays_with_xor(arr: Sequence[int], k: int) -> int:
    """Return the number of contiguous subarrays whose XOR equals k."""
    seen: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in arr:
        prefix ^= value
        count += seen[prefix ^ k]
        seen[prefix] += 1
    return count


def count_subarrays_with_sum(arr: Sequence[int], k: int) -> int:
    """Return the number of contiguous subarrays whose sum equals k."""
    seen: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in arr:
        prefix += value
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def longest_zero_sum_subarray(arr: Sequence[int]) -> int:
    """Return the length of the longest contiguous subarray summing to zero."""
    first_seen: Dict[int, int] = {}
    best = 0
    total = 0
    for i, value in enumerate(arr):
        total += value
        if total == 0:
            best = i + 1
        elif total in first_seen:
            best = max(best, i - first_seen[total])
        else:
            first_seen[total] = i
    return best


def longest_subarray_with_sum(arr: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous subarray summing to k."""
    first_seen: Dict[int, int] = {}
    best = 0
    total = 0
    for i, value in enumerate(arr):
        total += value
        if total == k:
            best = max(best, i + 1)
        start = first_seen.get(total - k)
        if start is not None:
            best = max(best, i - start)
        first_seen.setdefault(total, i)
    return best


def _count_at_most(nums: Sequence[int], goal: int) -> int:
    if goal < 0:
        return 0
    left = 0
    window = 0
    count = 0
    for right, value in enumerate(nums):
        window += value
        while window > goal:
            window -= nums[left]
            left += 1
        count += right - left + 1
    return count


def count_binary_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Return the number of contiguous subarrays of a 0/1 list whose sum equals goal."""
    return _count_at_most(nums, goal) - _count_at_most(nums, goal - 1)


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray_sum() of an empty sequence")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def max_product_subarray(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_product_subarray() of an empty sequence")
    prefix = suffix = 1
    best = nums[0]
    for front, back in zip(nums, reversed(nums)):
        prefix = (prefix or 1) * front
        suffix = (suffix or 1) * back
        best = max(best, prefix, suffix)
    return best


def _kadane(values: Sequence[int]) -> int:
    best = running = values[0]
    for value in values[1:]:
        running = value if running < 0 else running + value
        best = max(best, running)
    return best


def max_rectangle_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the largest sum of a non-empty axis-aligned sub-rectangle of matrix."""
    if not matrix or not matrix[0]:
        raise ValueError("max_rectangle_sum() of an empty matrix")
    cols = len(matrix[0])
    best = None
    for left in range(cols):
        column_sums = [0] * len(matrix)
        for right in range(left, cols):
            column_sums = [acc + row[right] for acc, row in zip(column_sums, matrix)]
            candidate = _kadane(column_sums)
            if best is None or candidate > best:
                best = candidate
    return best


def longest_adjacent_diff_one_subsequence(arr: Sequence[int]) -> int:
    """Return the length of the longest subsequence whose neighbours differ by exactly one."""
    lengths: defaultdict[int, int] = defaultdict(int)
    best = 0
    for value in arr:
        lengths[value] = max(lengths[value - 1], lengths[value + 1]) + 1
        best = max(best, lengths[value])
    return best


def _sort_and_count(values: List[int]) -> Tuple[List[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    merged: List[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def inversion_count(arr: Sequence[int]) -> int:
    """Return the number of pairs i < j with arr[i] > arr[j]."""
    return _sort_and_count(list(arr))[1]