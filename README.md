# dsakit

Classic algorithm routines written as plain Python functions, with no runtime dependencies.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

- `dsakit.recursion`: `knapsack(values, weights, capacity)`, the best value of a 0/1 choice of items that fits the capacity.
- `dsakit.arrays`: `reverse_string`, `min_max`, `kth_smallest` (randomised quickselect, `k` counted from 1), `sort_012`, `move_negatives_to_front`, `sorted_union`, `sorted_intersection`, `rotate_right_by_one`, `max_subarray_sum`, `min_height_difference`, `min_jumps`, `find_duplicate`, `merge_sorted_in_place`, `merge_intervals`, `next_permutation`, `count_inversions` and `max_profit`.
- `dsakit.arrays_advanced`: `count_pairs_with_sum`, `common_elements`, `alternate_signs`, `has_zero_sum_subarray`, `big_factorial` (returns the digits as a string), `max_product_subarray`, `longest_consecutive_run`, `frequent_elements`, `max_profit_two_transactions`, `is_subset`, `has_triplet_with_sum`, `trapped_water`, `min_chocolate_spread`, `smallest_subarray_above`, `three_way_partition`, `min_swaps_to_group` and `min_merges_to_palindrome`.
- `dsakit.medians`: `median_of_equal_sorted` and `median_of_sorted` return an integer median (the two middle values averaged and truncated toward zero); `median_of_sorted_fast` works in logarithmic time and returns a float.
- `dsakit.backtracking`: `solve_maze` (moves down or right through cells holding 1; returns the path grid or `None`), `n_queens` (every solution as a 0/1 board) and `render_board`.
- `dsakit.graphs`: the `Node` class, `topological_sort` (depth-first), `topological_sort_kahn`, `cheapest_flight` (returns `None` when there is no route) and `clone_graph`.
- `dsakit.matrix`: `spiral_order`, `search_sorted_matrix`, `median_of_sorted_rows` and `row_with_most_ones` (returns `None` when there is no 1).

Empty input where a value is required, and out-of-range arguments, raise `ValueError`.

## Examples

```python
from dsakit.recursion import knapsack
from dsakit.arrays import merge_intervals, max_subarray_sum
from dsakit.graphs import cheapest_flight
from dsakit.matrix import spiral_order

knapsack([100, 50, 150], [10, 20, 30], 50)          # 250
merge_intervals([[1, 3], [2, 6], [8, 10]])           # [[1, 6], [8, 10]]
max_subarray_sum([1, 2, 3, -2, 5])                   # 9
cheapest_flight(3, [[0, 1, 100], [1, 2, 100], [0, 2, 500]], 0, 2, 1)  # 200
spiral_order([[1, 2], [3, 4]])                       # [1, 2, 4, 3]
```

`merge_sorted_in_place` rearranges its two lists in place. Every other function leaves its arguments unchanged and returns a new value.

## What it does not do

This is a library only. It has no command-line program and reads nothing from standard input; call the functions from your own code.

## Running the tests

```
pytest
```