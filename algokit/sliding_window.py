"""Sliding-window scans over integer lists and strings."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence

_VOWELS = frozenset("aeiou")


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of 1s obtainable by flipping at most k zeros."""
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        if zeros > k:
            # The window never shrinks, it only slides once it is too long.
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def max_card_score(card_points: Sequence[int], k: int) -> int:
    """Return the best total of k cards taken from the two ends of the row."""
    if not 0 <= k <= len(card_points):
        raise ValueError(f"k must be between 0 and {len(card_points)}, got {k}")
    left_sum = sum(card_points[:k])
    right_sum = 0
    best = left_sum
    for taken in range(1, k + 1):
        left_sum -= card_points[k - taken]
        right_sum += card_points[-taken]
        best = max(best, left_sum + right_sum)
    return best


def character_replacement(s: str, k: int) -> int:
    """Return the longest substring that becomes one repeated letter after at most k changes."""
    freqs: Counter[str] = Counter()
    left = 0
    max_freq = 0
    best = 0
    for right, ch in enumerate(s):
        freqs[ch] += 1
        max_freq = max(max_freq, freqs[ch])
        while (right - left + 1) - max_freq > k:
            freqs[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def longest_unique_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: Dict[str, int] = {}
    left = 0
    best = 0
    for right, ch in enumerate(s):
        previous = last_seen.get(ch, -1)
        if previous >= left:
            left = previous + 1
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of s containing every character of t with multiplicity.

    Returns an empty string when there is none.
    """
    if not t:
        return ""
    need: Counter[str] = Counter(t)
    required = len(t)
    matched = 0
    left = 0
    best_len = len(s) + 1
    best_start = -1
    for right, ch in enumerate(s):
        if need[ch] > 0:
            matched += 1
        need[ch] -= 1
        while matched == required:
            if right - left + 1 < best_len:
                best_len = right - left + 1
                best_start = left
            need[s[left]] += 1
            if need[s[left]] > 0:
                matched -= 1
            left += 1
    return "" if best_start == -1 else s[best_start:best_start + best_len]


def beautiful_substrings(s: str, k: int) -> int:
    """Count substrings with as many vowels as consonants whose count product divides by k."""
    if k == 0:
        raise ValueError("k must be non-zero")
    result = 0
    for start in range(len(s)):
        vowels = consonants = 0
        for ch in s[start:]:
            if ch in _VOWELS:
                vowels += 1
            else:
                consonants += 1
            if vowels == consonants and (vowels * consonants) % k == 0:
                result += 1
    return result