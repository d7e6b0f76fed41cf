"""Searching, counting and rearranging over lists of integers."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from functools import reduce
from operator import xor
from typing import List, MutableSequence, Optional, Sequence, Tuple


def largest(arr: Sequence[int]) -> int:
    """Return the largest element; raise ValueError for an empty sequence."""
    if not arr:
        raise ValueError("largest() of an empty sequence")
    return max(arr)


def kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest element (1-based, duplicates counted)."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return sorted(nums)[len(nums) - k]


def leaders(arr: Sequence[int]) -> List[int]:
    """Return the elements not smaller than any element to their right, in order."""
    result: List[int] = []
    best: Optional[int] = None
    for value in reversed(arr):
        if best is None or value >= best:
            result.append(value)
            best = value
    result.reverse()
    return result


def majority_element(nums: Sequence[int]) -> Optional[int]:
    """Return the element occurring more than len(nums) // 2 times, or None."""
    candidate: Optional[int] = None
    count = 0
    for value in nums:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is not None and nums.count(candidate) > len(nums) // 2:
        return candidate
    return None


def majority_elements_third(nums: Sequence[int]) -> List[int]:
    """Return the elements occurring more than len(nums) // 3 times."""
    first: Optional[int] = None
    second: Optional[int] = None
    count1 = count2 = 0
    for value in nums:
        if count1 == 0 and second != value:
            first, count1 = value, 1
        elif count2 == 0 and first != value:
            second, count2 = value, 1
        elif value == first:
            count1 += 1
        elif value == second:
            count2 += 1
        else:
            count1 -= 1
            count2 -= 1

    threshold = len(nums) // 3 + 1
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and nums.count(candidate) >= threshold
    ]


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = run = 0
    for value in nums:
        run = run + 1 if value == 1 else 0
        best = max(best, run)
    return best


def first_missing_from_one(arr: Sequence[int]) -> int:
    """Return the smallest integer from 1 upwards that is not in arr."""
    present = set(arr)
    return next(i for i in range(1, len(arr) + 2) if i not in present)


def find_missing_and_repeating(arr: Sequence[int]) -> Tuple[int, int]:
    """For a list over 1..n with one value doubled and one absent, return (repeating, missing)."""
    n = len(arr)
    expected_sum = n * (n + 1) // 2
    expected_squares = n * (n + 1) * (2 * n + 1) // 6
    difference = sum(arr) - expected_sum
    if difference == 0:
        raise ValueError("no repeating and missing pair can be determined")
    squares_difference = sum(v * v for v in arr) - expected_squares
    total = squares_difference // difference
    repeating = (difference + total) // 2
    missing = repeating - difference
    return repeating, missing


def missing_number(nums: Sequence[int]) -> int:
    """Return the number from 0..len(nums) absent from nums."""
    return reduce(xor, range(1, len(nums) + 1), 0) ^ reduce(xor, nums, 0)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    non_zero = [v for v in nums if v != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Return whether nums is a rotation of a non-decreasing sequence."""
    rotated = list(nums[1:]) + list(nums[:1])
    drops = sum(1 for current, following in zip(nums, rotated) if current > following)
    return drops <= 1


def single_number(arr: Sequence[int]) -> int:
    """Return the XOR of all elements: the one value not occurring in pairs."""
    return reduce(xor, arr, 0)


def intersection_sorted(first: Sequence[int], second: Sequence[int]) -> List[int]:
    """Return the distinct common elements of two sorted sequences, sorted."""
    result: List[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a < b:
            i += 1
        elif b < a:
            j += 1
        else:
            if not result or result[-1] != a:
                result.append(a)
            i += 1
            j += 1
    return result


def merge_sorted_in_place(first: MutableSequence[int], second: MutableSequence[int]) -> None:
    """Merge two sorted lists so that first holds the smallest values, both sorted."""
    size = len(first)
    total = size + len(second)

    def slot(k: int) -> Tuple[MutableSequence[int], int]:
        return (first, k) if k < size else (second, k - size)

    gap = total // 2 + total % 2
    while gap > 0:
        for left in range(total - gap):
            left_list, li = slot(left)
            right_list, ri = slot(left + gap)
            if left_list[li] > right_list[ri]:
                left_list[li], right_list[ri] = right_list[ri], left_list[li]
        if gap == 1:
            break
        gap = gap // 2 + gap % 2


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in nums."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        best = max(best, end - value + 1)
    return best


def search_range(nums: Sequence[int], target: int) -> Tuple[int, int]:
    """Return the first and last index of target in sorted nums, or (-1, -1)."""
    lower = bisect_left(nums, target)
    if lower == len(nums) or nums[lower] != target:
        return -1, -1
    return lower, bisect_right(nums, target) - 1


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: List[int] = []
    for value in nums:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)