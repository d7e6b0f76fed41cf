"""Checks, counts and transformations over strings and lists of words."""

from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict
from itertools import groupby
from typing import Dict, List, Sequence, Set

_VOWELS = frozenset("aeiouAEIOU")

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def buddy_strings(s: str, goal: str) -> bool:
    """Return whether swapping exactly two characters of s yields goal."""
    if len(s) != len(goal):
        return False
    if s == goal:
        return len(set(s)) < len(s)
    differing = [i for i, (a, b) in enumerate(zip(s, goal)) if a != b]
    if len(differing) != 2:
        return False
    first, second = differing
    return s[first] == goal[second] and s[second] == goal[first]


def shortest_distance(words: Sequence[str], word1: str, word2: str) -> int:
    """Return the smallest index distance between word1 and word2 in words.

    Returns 0 when both are the same word and it occurs, and -1 when the
    words cannot both be found.
    """
    if word1 == word2:
        return 0 if word1 in words else -1
    last1 = last2 = None
    best = None
    for i, word in enumerate(words):
        if word == word1:
            last1 = i
            if last2 is not None:
                best = i - last2 if best is None else min(best, i - last2)
        elif word == word2:
            last2 = i
            if last1 is not None:
                best = i - last1 if best is None else min(best, i - last1)
    return -1 if best is None else best


def concatenated_words(words: Sequence[str]) -> List[str]:
    """Return, in input order, the words made of at least two words of the list."""
    dictionary: Set[str] = set(words)
    memo: Dict[str, bool] = {}

    def is_concat(word: str) -> bool:
        if word in memo:
            return memo[word]
        result = False
        for cut in range(1, len(word) + 1):
            prefix, suffix = word[:cut], word[cut:]
            if prefix in dictionary and (suffix in dictionary or is_concat(suffix)):
                result = True
                break
        memo[word] = result
        return result

    return [word for word in words if is_concat(word)]


def count_and_say(n: int) -> str:
    """Return the n-th term (1-based) of the count-and-say sequence."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def decode_at_index(s: str, k: int) -> str:
    """Return the k-th letter (1-based) of the tape that s encodes.

    Letters are written to the tape; a digit d repeats the whole tape so
    far d times in total. Returns an empty string if no letter is found.
    """
    size = 0
    for ch in s:
        size = size * int(ch) if ch.isdigit() else size + 1
    for ch in reversed(s):
        k %= size
        if k == 0 and ch.isalpha():
            return ch
        if ch.isalpha():
            size -= 1
        else:
            size //= int(ch)
    return ""


def min_deletion_size(strs: Sequence[str]) -> int:
    """Return how many columns of equal-length strings are not sorted top to bottom."""
    if not strs:
        raise ValueError("min_deletion_size() of an empty sequence")
    return sum(
        1
        for column in zip(*strs)
        if any(below < above for above, below in zip(column, column[1:]))
    )


def detect_capital_use(word: str) -> bool:
    """Return whether word is all capitals, all lower case, or capitalised only at the start."""
    upper = sum(1 for ch in word if ch.isupper())
    return upper in (0, len(word)) or (upper == 1 and word[0].isupper())


def halves_are_alike(s: str) -> bool:
    """Return whether the two halves of s hold equally many vowels.

    The halves are s[:n // 2] and the n // 2 characters that follow.
    """
    half = len(s) // 2

    def vowels(part: str) -> int:
        return sum(1 for ch in part if ch in _VOWELS)

    return vowels(s[:half]) == vowels(s[half:2 * half])


def int_to_roman(num: int) -> str:
    """Return num written in Roman numerals; non-positive numbers give an empty string."""
    parts: List[str] = []
    for value, symbol in _ROMAN_NUMERALS:
        if num <= 0:
            break
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def is_subsequence(s: str, t: str) -> bool:
    """Return whether s can be obtained from t by deleting characters."""
    positions: defaultdict[str, List[int]] = defaultdict(list)
    for i, ch in enumerate(t):
        positions[ch].append(i)
    previous = -1
    for ch in s:
        indices = positions.get(ch)
        if not indices:
            return False
        at = bisect_right(indices, previous)
        if at == len(indices):
            return False
        previous = indices[at]
    return True


def largest_odd_number(num: str) -> str:
    """Return the longest prefix of the digit string num that ends in an odd digit."""
    return num.rstrip("02468")


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest string that every element of strs starts with."""
    if not strs:
        raise ValueError("longest_common_prefix() of an empty sequence")
    first, last = min(strs), max(strs)
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]