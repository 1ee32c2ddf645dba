"""Medians of two sorted sequences."""

import heapq
from itertools import islice


def _halve(total):
    """Halve an integer, rounding toward zero."""
    quotient = abs(total) // 2
    return quotient if total >= 0 else -quotient


def median_of_equal_sorted(a, b):
    """Integer median of two sorted sequences of equal, non-zero length."""
    if len(a) != len(b):
        raise ValueError("both sequences must have the same length")
    if not a:
        raise ValueError("sequences must not be empty")
    n = len(a)
    lower, upper = islice(heapq.merge(a, b), n - 1, n + 1)
    return _halve(lower + upper)


def median_of_sorted(a, b):
    """Integer median of two sorted sequences, found by merging."""
    total = len(a) + len(b)
    if total == 0:
        raise ValueError("at least one sequence must be non-empty")
    middle = total // 2
    ordered = heapq.merge(a, b)
    if total % 2:
        return next(islice(ordered, middle, None))
    lower, upper = islice(ordered, middle - 1, middle + 1)
    return _halve(lower + upper)


def _median_of_two(a, b):
    return (a + b) / 2


def _median_of_three(a, b, c):
    return a + b + c - max(a, b, c) - min(a, b, c)


def _median_of_four(a, b, c, d):
    return (a + b + c + d - max(a, b, c, d) - min(a, b, c, d)) / 2


def _median_single(values):
    if not values:
        raise ValueError("at least one sequence must be non-empty")
    half = len(values) // 2
    if len(values) % 2 == 0:
        return (values[half] + values[half - 1]) / 2
    return float(values[half])


def median_of_sorted_fast(a, b):
    """Median of two sorted sequences in logarithmic time, as a float."""
    small, large = list(a), list(b)
    if len(small) > len(large):
        small, large = large, small
    while True:
        n, m = len(small), len(large)
        if n == 0:
            return _median_single(large)
        half = m // 2
        if n == 1:
            if m == 1:
                return _median_of_two(small[0], large[0])
            if m % 2:
                return _median_of_two(
                    large[half], _median_of_three(small[0], large[half - 1], large[half + 1])
                )
            return float(_median_of_three(large[half], large[half - 1], small[0]))
        if n == 2:
            if m == 2:
                return _median_of_four(small[0], small[1], large[0], large[1])
            if m % 2:
                return float(
                    _median_of_three(
                        large[half],
                        max(small[0], large[half - 1]),
                        min(small[1], large[half + 1]),
                    )
                )
            return _median_of_four(
                large[half],
                large[half - 1],
                max(small[0], large[half - 2]),
                min(small[1], large[half + 1]),
            )
        cut = (n - 1) // 2
        if small[cut] <= large[(m - 1) // 2]:
            small, large = small[cut:], large[: m - cut]
        else:
            small, large = small[: n // 2 + 1], large[cut:]