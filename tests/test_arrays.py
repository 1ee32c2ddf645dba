from collections import Counter
from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.arrays import (
    count_inversions,
    find_duplicate,
    kth_smallest,
    max_profit,
    max_subarray_sum,
    merge_intervals,
    merge_sorted_in_place,
    min_height_difference,
    min_jumps,
    min_max,
    move_negatives_to_front,
    next_permutation,
    reverse_string,
    rotate_right_by_one,
    sort_012,
    sorted_intersection,
    sorted_union,
)

ints = st.integers(-1000, 1000)


@given(st.text())
def test_reverse_string_round_trip(s):
    assert reverse_string(reverse_string(s)) == s
    assert len(reverse_string(s)) == len(s)


def test_reverse_string_swaps_ends():
    result = reverse_string("geeks")
    assert result[0] == "s" and result[-1] == "g"


@given(st.lists(ints, min_size=1))
def test_min_max(values):
    assert min_max(values) == (min(values), max(values))


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


@given(st.data())
def test_kth_smallest(data):
    values = data.draw(st.lists(ints, min_size=1, max_size=40))
    k = data.draw(st.integers(1, len(values)))
    original = list(values)
    assert kth_smallest(values, k) == sorted(values)[k - 1]
    assert values == original


@pytest.mark.parametrize("k", [0, 4])
def test_kth_smallest_bad_k(k):
    with pytest.raises(ValueError):
        kth_smallest([3, 1, 2], k)


@given(st.lists(st.sampled_from([0, 1, 2])))
def test_sort_012(values):
    assert sort_012(values) == sorted(values)


def test_sort_012_rejects_other_values():
    with pytest.raises(ValueError):
        sort_012([0, 3, 1])


@given(st.lists(ints))
def test_move_negatives_to_front(values):
    result = move_negatives_to_front(values)
    negatives = [v for v in values if v < 0]
    assert Counter(result) == Counter(values)
    assert result[: len(negatives)] == negatives
    assert all(v >= 0 for v in result[len(negatives):])


@given(st.sets(ints), st.sets(ints))
def test_sorted_union(a, b):
    assert sorted_union(sorted(a), sorted(b)) == sorted(a | b)


@given(st.sets(ints), st.sets(ints))
def test_sorted_intersection(a, b):
    assert sorted_intersection(sorted(a), sorted(b)) == sorted(a & b)


@given(st.lists(ints, min_size=1))
def test_rotate_right_by_one(values):
    rotated = rotate_right_by_one(values)
    assert rotated[0] == values[-1]
    assert rotated[1:] == values[:-1]
    result = values
    for _ in values:
        result = rotate_right_by_one(result)
    assert result == values


def test_rotate_empty():
    assert rotate_right_by_one([]) == []


@given(st.lists(ints, min_size=1, max_size=30))
def test_max_subarray_sum(values):
    best = max(
        sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1)
    )
    assert max_subarray_sum(values) == best


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_min_height_difference_example():
    assert min_height_difference([1, 5, 8, 10], 2) == 5


@given(st.lists(st.integers(0, 100), min_size=2, max_size=20), st.integers(0, 50))
def test_min_height_difference_bounds(heights, k):
    result = min_height_difference(heights, k)
    assert 0 <= result <= max(heights) - min(heights)


def test_min_height_difference_single():
    assert min_height_difference([42], 7) == 0


def test_min_height_difference_empty():
    with pytest.raises(ValueError):
        min_height_difference([], 1)


def _fewest_jumps(steps):
    target = len(steps) - 1
    frontier, seen, jumps = {0}, {0}, 0
    while frontier:
        if target in frontier:
            return jumps
        following = set()
        for pos in frontier:
            for q in range(pos + 1, min(pos + steps[pos], target) + 1):
                if q not in seen:
                    seen.add(q)
                    following.add(q)
        frontier = following
        jumps += 1
    return None


def test_min_jumps_example():
    assert min_jumps([1, 3, 5, 8, 9, 2, 6, 7, 6, 8, 9]) == 3


def test_min_jumps_stuck_at_start():
    assert min_jumps([0, 1, 2]) is None


@given(st.lists(st.integers(0, 5), min_size=2, max_size=15))
def test_min_jumps_matches_search(steps):
    assert min_jumps(steps) == _fewest_jumps(steps)


def test_min_jumps_empty():
    with pytest.raises(ValueError):
        min_jumps([])


def test_find_duplicate_example():
    assert find_duplicate([1, 3, 4, 2, 2]) == 2


@given(st.data())
def test_find_duplicate(data):
    n = data.draw(st.integers(1, 30))
    dup = data.draw(st.integers(1, n))
    nums = data.draw(st.permutations(list(range(1, n + 1)) + [dup]))
    assert find_duplicate(list(nums)) == dup


@given(st.lists(ints, max_size=20), st.lists(ints, max_size=20))
def test_merge_sorted_in_place(a, b):
    first, second = sorted(a), sorted(b)
    merge_sorted_in_place(first, second)
    assert len(first) == len(a) and len(second) == len(b)
    assert first + second == sorted(a + b)


def test_merge_intervals_example():
    intervals = [[1, 3], [2, 6], [8, 10], [15, 18]]
    assert merge_intervals(intervals) == [[1, 6], [8, 10], [15, 18]]


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


@given(st.lists(st.tuples(st.integers(0, 50), st.integers(0, 20)), max_size=15))
def test_merge_intervals_disjoint_and_covering(pairs):
    intervals = [[s, s + length] for s, length in pairs]
    merged = merge_intervals(intervals)
    for left, right in zip(merged, merged[1:]):
        assert left[1] < right[0]
    for s, e in intervals:
        assert any(ms <= s and e <= me for ms, me in merged)


@given(st.sets(st.integers(0, 9), min_size=1, max_size=5))
def test_next_permutation_follows_lexicographic_order(values):
    perms = [list(p) for p in permutations(sorted(values))]
    for current, following in zip(perms, perms[1:]):
        assert next_permutation(current) == following
    assert next_permutation(perms[-1]) == perms[0]


def test_next_permutation_does_not_mutate():
    nums = [1, 2, 3]
    next_permutation(nums)
    assert nums == [1, 2, 3]


def test_count_inversions_example():
    assert count_inversions([1, 20, 6, 4, 5]) == 5


@given(st.sets(ints, max_size=30))
def test_count_inversions_extremes(values):
    ordered = sorted(values)
    n = len(ordered)
    assert count_inversions(ordered) == 0
    assert count_inversions(ordered[::-1]) == n * (n - 1) // 2


@given(st.lists(st.integers(0, 1000), max_size=30))
def test_max_profit(prices):
    best = max(
        (prices[j] - prices[i] for i in range(len(prices)) for j in range(i + 1, len(prices))),
        default=0,
    )
    assert max_profit(prices) == max(best, 0)