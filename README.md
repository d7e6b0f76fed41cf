# algokit

A small, dependency-free library of classic algorithms over plain Python
lists, strings and integers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.arrays`: `largest`, `kth_largest`, `leaders`,
  `majority_element`, `majority_elements_third`, `max_consecutive_ones`,
  `first_missing_from_one`, `find_missing_and_repeating`, `missing_number`,
  `move_zeroes`, `is_sorted_and_rotated`, `single_number`,
  `intersection_sorted`, `merge_sorted_in_place`, `longest_consecutive`,
  `search_range`, `length_of_lis`.
- `algokit.sums`: pair, triplet and subarray sums: `two_sum_sorted`,
  `has_pair_with_sum`, `three_sum_zero`, `count_subarrays_with_xor`,
  `count_subarrays_with_sum`, `longest_zero_sum_subarray`,
  `longest_subarray_with_sum`, `count_binary_subarrays_with_sum`,
  `max_subarray_sum`, `max_product_subarray`, `max_rectangle_sum`,
  `longest_adjacent_diff_one_subsequence`, `inversion_count`.
- `algokit.sliding_window`: `longest_ones`, `max_card_score`,
  `character_replacement`, `longest_unique_substring`, `min_window`,
  `beautiful_substrings`.
- `algokit.greedy`: `max_profit`, `max_profit_multiple`, `assign_cookies`,
  `min_candy`, `insert_interval`, `min_jumps`, `can_reach_end`,
  `fractional_knapsack`, `min_platforms`, `merge_intervals`,
  `max_min_difference`.
- `algokit.strings`: `buddy_strings`, `shortest_distance`,
  `concatenated_words`, `count_and_say`, `decode_at_index`,
  `min_deletion_size`, `detect_capital_use`, `halves_are_alike`,
  `int_to_roman`, `is_subsequence`, `largest_odd_number`,
  `longest_common_prefix`.
- `algokit.numbers`: `divisors`, `is_armstrong`, `closest_primes`,
  `count_primes`, `count_primes_in_range`, `divide`, `factorial`, `fib`,
  `fib_recursive`, `min_bit_flips`.
- `algokit.recursion`: `all_subsequences`, `first_subsequence_with_sum`,
  `count_subsequences_with_sum`, `combination_sum`,
  `combination_sum_unique`, `graph_coloring`.
- `algokit.disjoint_set`: `DisjointSet` over the nodes `0..n`, with
  `find`, `union_by_rank` and `union_by_size`.
- `algokit.graphs`: `dijkstra`, `dijkstra_ordered` and
  `spanning_tree_weight` on weighted undirected graphs. Unreachable
  vertices keep the distance `UNREACHABLE` (`10**9`).

## Examples

```python
from algokit.arrays import leaders, search_range
from algokit.strings import int_to_roman
from algokit.graphs import dijkstra
from algokit.disjoint_set import DisjointSet

leaders([16, 17, 4, 3, 5, 2])          # [17, 5, 2]
search_range([5, 7, 7, 8, 8, 10], 8)   # (3, 4)
int_to_roman(1994)                     # "MCMXCIV"

dijkstra(3, [[0, 1, 1], [1, 2, 3], [0, 2, 6]], 0)  # [0, 1, 4]

ds = DisjointSet(7)
ds.union_by_size(1, 2)
ds.union_by_size(2, 3)
ds.find(1) == ds.find(3)               # True
```

Functions take their inputs as plain sequences and return new values.
Two of them change the lists they are given instead: `move_zeroes` and
`merge_sorted_in_place`. Where an answer does not exist, some functions
return a marker value, such as `(-1, -1)` from `two_sum_sorted` or
`None` from `majority_element`. Inputs that have no answer at all, such
as an empty list given to `largest`, raise `ValueError`.

## What it does not do

algokit is a library only. It has no command-line tool and no scripts,
and it does not read or write files.