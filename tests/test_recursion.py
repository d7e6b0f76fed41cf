from collections import Counter
from itertools import combinations

import pytest

from algokit.recursion import (
    all_subsequences,
    combination_sum,
    combination_sum_unique,
    count_subsequences_with_sum,
    first_subsequence_with_sum,
    graph_coloring,
)


def _matrix(size, edges):
    graph = [[False] * size for _ in range(size)]
    for u, v in edges:
        graph[u][v] = graph[v][u] = True
    return graph


def _is_sub_multiset(part, whole):
    return not (Counter(part) - Counter(whole))


@pytest.mark.parametrize("arr", [[], [5], [3, 1, 2], [1, 2, 3, 4]])
def test_all_subsequences_cover_every_choice(arr):
    result = all_subsequences(arr)
    assert len(result) == 2 ** len(arr)
    expected = sorted(
        list(combo) for r in range(len(arr) + 1) for combo in combinations(arr, r)
    )
    assert sorted(result) == expected


def test_all_subsequences_order_starts_empty_ends_full():
    result = all_subsequences([3, 1, 2])
    assert result[0] == []
    assert result[-1] == [3, 1, 2]


def test_first_subsequence_with_sum_example():
    assert first_subsequence_with_sum([1, 2, 1], 2) == [1, 1]


@pytest.mark.parametrize("arr,target", [([4, 7, 1, 3], 8), ([5, -2, 9], 3), ([2, 2], 4)])
def test_first_subsequence_with_sum_sums_to_target(arr, target):
    found = first_subsequence_with_sum(arr, target)
    assert sum(found) == target
    assert _is_sub_multiset(found, arr)


def test_first_subsequence_with_sum_none_when_impossible():
    assert first_subsequence_with_sum([2, 4, 6], 5) is None


def test_count_subsequences_with_sum_example():
    assert count_subsequences_with_sum([1, 2, 1], 2) == 2


@pytest.mark.parametrize(
    "arr,target", [([1, 2, 3, 4, 5], 5), ([0, 1, 1, 2], 2), ([3, 3, 3], 6), ([7], 1)]
)
def test_count_subsequences_with_sum_matches_enumeration(arr, target):
    expected = sum(1 for sub in all_subsequences(arr) if sum(sub) == target)
    assert count_subsequences_with_sum(arr, target) == expected


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


@pytest.mark.parametrize("candidates,target", [([2, 3, 5], 8), ([3, 4, 5], 12), ([2], 1)])
def test_combination_sum_results_are_valid_and_distinct(candidates, target):
    result = combination_sum(candidates, target)
    assert all(sum(combo) == target for combo in result)
    assert all(set(combo) <= set(candidates) for combo in result)
    keys = [tuple(sorted(combo)) for combo in result]
    assert len(keys) == len(set(keys))


def test_combination_sum_zero_target_gives_empty_combination():
    assert combination_sum([2, 3], 0) == [[]]


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


@pytest.mark.parametrize(
    "candidates,target", [([10, 1, 2, 7, 6, 1, 5], 8), ([2, 5, 2, 1, 2], 5), ([1, 1, 1], 2)]
)
def test_combination_sum_unique_results(candidates, target):
    result = combination_sum_unique(candidates, target)
    assert result
    assert all(sum(combo) == target for combo in result)
    assert all(_is_sub_multiset(combo, candidates) for combo in result)
    assert all(combo == sorted(combo) for combo in result)
    assert len({tuple(c) for c in result}) == len(result)
    assert result == sorted(result)


def test_combination_sum_unique_none_possible():
    assert combination_sum_unique([4, 6], 5) == []


def test_graph_coloring_worked_example():
    graph = _matrix(4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)])
    assert graph_coloring(graph, 3) is True


def test_graph_coloring_triangle_needs_three_colours():
    graph = _matrix(4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)])
    assert graph_coloring(graph, 2) is False


def test_graph_coloring_even_cycle_two_colours():
    graph = _matrix(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert graph_coloring(graph, 2) is True
    assert graph_coloring(graph, 1) is False


def test_graph_coloring_no_colours():
    assert graph_coloring(_matrix(1, []), 0) is False
    assert graph_coloring([], 0) is True