"""Backtracking over subsequences, combinations and graph colourings."""

from __future__ import annotations

from typing import List, Optional, Sequence


def all_subsequences(arr: Sequence[int]) -> List[List[int]]:
    """Return every subsequence of arr, skipping an element before taking it."""
    result: List[List[int]] = []
    chosen: List[int] = []

    def walk(idx: int) -> None:
        if idx == len(arr):
            result.append(list(chosen))
            return
        walk(idx + 1)
        chosen.append(arr[idx])
        walk(idx + 1)
        chosen.pop()

    walk(0)
    return result


def first_subsequence_with_sum(arr: Sequence[int], target: int) -> Optional[List[int]]:
    """Return the first subsequence summing to target, trying to take elements first.

    Returns None when no subsequence has that sum.
    """
    chosen: List[int] = []

    def walk(idx: int, total: int) -> bool:
        if idx == len(arr):
            return total == target
        chosen.append(arr[idx])
        if walk(idx + 1, total + arr[idx]):
            return True
        chosen.pop()
        return walk(idx + 1, total)

    return list(chosen) if walk(0, 0) else None


def count_subsequences_with_sum(arr: Sequence[int], target: int) -> int:
    """Count subsequences summing to target.

    Partial sums above target are abandoned, so the count is exact for
    non-negative elements.
    """

    def walk(idx: int, total: int) -> int:
        if total > target:
            return 0
        if idx == len(arr):
            return 1 if total == target else 0
        return walk(idx + 1, total + arr[idx]) + walk(idx + 1, total)

    return walk(0, 0)


def combination_sum(candidates: Sequence[int], target: int) -> List[List[int]]:
    """Return the combinations of candidates, each usable repeatedly, summing to target."""
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")
    result: List[List[int]] = []
    chosen: List[int] = []

    def walk(idx: int, remaining: int) -> None:
        if idx == len(candidates):
            if remaining == 0:
                result.append(list(chosen))
            return
        value = candidates[idx]
        if value <= remaining:
            chosen.append(value)
            walk(idx, remaining - value)
            chosen.pop()
        walk(idx + 1, remaining)

    walk(0, target)
    return result


def combination_sum_unique(candidates: Sequence[int], target: int) -> List[List[int]]:
    """Return the distinct combinations, each candidate used at most once, summing to target."""
    values = sorted(candidates)
    result: List[List[int]] = []
    chosen: List[int] = []

    def walk(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        for i in range(start, len(values)):
            if i > start and values[i] == values[i - 1]:
                continue
            if values[i] > remaining:
                break
            chosen.append(values[i])
            walk(i + 1, remaining - values[i])
            chosen.pop()

    walk(0, target)
    return result


def graph_coloring(graph: Sequence[Sequence[bool]], m: int) -> bool:
    """Return whether the graph, given as an adjacency matrix, can be coloured with m colours."""
    size = len(graph)
    colors = [0] * size

    def is_safe(node: int, color: int) -> bool:
        return not any(
            other != node and graph[other][node] and colors[other] == color
            for other in range(size)
        )

    def solve(node: int) -> bool:
        if node == size:
            return True
        for color in range(1, m + 1):
            if is_safe(node, color):
                colors[node] = color
                if solve(node + 1):
                    return True
                colors[node] = 0
        return False

    return solve(0)