"""Basic array algorithms."""

import random
from itertools import combinations


def reverse_string(s):
    """Return the string reversed."""
    return s[::-1]


def min_max(values):
    """Return the smallest and the largest value as a pair."""
    items = list(values)
    if not items:
        raise ValueError("min_max() needs at least one value")
    return min(items), max(items)


def _partition(items, start, end):
    pick = random.randint(start, end)
    items[pick], items[end] = items[end], items[pick]
    pivot = items[end]
    store = start
    for i in range(start, end):
        if items[i] <= pivot:
            items[i], items[store] = items[store], items[i]
            store += 1
    items[store], items[end] = items[end], items[store]
    return store


def kth_smallest(values, k):
    """Return the k-th smallest value (1-based) using randomised quickselect."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("k is out of range")
    start, end = 0, len(items) - 1
    while True:
        pivot_index = _partition(items, start, end)
        rank = pivot_index - start + 1
        if rank == k:
            return items[pivot_index]
        if rank > k:
            end = pivot_index - 1
        else:
            k -= rank
            start = pivot_index + 1


def sort_012(values):
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag)."""
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        value = items[mid]
        if value == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
        else:
            raise ValueError(f"unexpected value {value!r}; only 0, 1 and 2 are allowed")
    return items


def move_negatives_to_front(values):
    """Return a copy with every negative number moved before the others."""
    items = list(values)
    store = 0
    for i, value in enumerate(items):
        if value < 0:
            items[store], items[i] = items[i], items[store]
            store += 1
    return items


def sorted_union(a, b):
    """Merge two sorted sequences, emitting a value found in both only once per match."""
    result = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            result.append(a[i])
            i += 1
        elif b[j] < a[i]:
            result.append(b[j])
            j += 1
        else:
            result.append(b[j])
            i += 1
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def sorted_intersection(a, b):
    """Return the values common to two sorted sequences, in order."""
    result = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif b[j] < a[i]:
            j += 1
        else:
            result.append(b[j])
            i += 1
            j += 1
    return result


def rotate_right_by_one(values):
    """Return a copy rotated one place to the right."""
    items = list(values)
    return items[-1:] + items[:-1]


def max_subarray_sum(values):
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    best = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def min_height_difference(heights, k):
    """Minimise the spread of heights after adding or subtracting k to each."""
    ordered = sorted(heights)
    if not ordered:
        raise ValueError("min_height_difference() needs at least one height")
    if len(ordered) == 1:
        return 0
    answer = ordered[-1] - ordered[0]
    small, big = ordered[0] + k, ordered[-1] - k
    if small > big:
        small, big = big, small
    for height in ordered[1:-1]:
        subtract, add = height - k, height + k
        if subtract >= small or add <= big:
            continue
        if big - subtract <= add - small:
            small = subtract
        else:
            big = add
    return min(answer, big - small)


def min_jumps(steps):
    """Fewest jumps from the first to the last position, or None if unreachable.

    Each entry gives the longest jump allowed from that position.
    """
    steps = list(steps)
    if not steps:
        raise ValueError("min_jumps() needs at least one position")
    if steps[0] == 0:
        return None
    last = len(steps) - 1
    if last == 0:
        return 0
    max_reach = steps[0]
    remaining = steps[0]
    jumps = 1
    for i in range(1, len(steps)):
        if i == last:
            return jumps
        max_reach = max(max_reach, i + steps[i])
        remaining -= 1
        if remaining == 0:
            jumps += 1
            if i >= max_reach:
                return None
            remaining = max_reach - i
    return None


def find_duplicate(nums):
    """Find the repeated value among n + 1 integers in 1..n (Floyd's cycle finding)."""
    tortoise = hare = nums[0]
    while True:
        tortoise = nums[tortoise]
        hare = nums[nums[hare]]
        if tortoise == hare:
            break
    tortoise = nums[0]
    while tortoise != hare:
        tortoise = nums[tortoise]
        hare = nums[hare]
    return hare


def _next_gap(gap):
    if gap <= 1:
        return 0
    return gap // 2 + gap % 2


def merge_sorted_in_place(first, second):
    """Rearrange two sorted lists in place so that together they are sorted.

    The smallest values end up in ``first`` and the rest in ``second``; each
    list keeps its length.
    """
    n, m = len(first), len(second)
    gap = _next_gap(n + m)
    while gap > 0:
        i = 0
        while i + gap < n:
            if first[i] > first[i + gap]:
                first[i], first[i + gap] = first[i + gap], first[i]
            i += 1
        j = gap - n if gap > n else 0
        while i < n and j < m:
            if first[i] > second[j]:
                first[i], second[j] = second[j], first[i]
            i += 1
            j += 1
        if j < m:
            for j in range(m - gap):
                if second[j] > second[j + gap]:
                    second[j], second[j + gap] = second[j + gap], second[j]
        gap = _next_gap(gap)


def merge_intervals(intervals):
    """Merge overlapping [start, end] intervals, returned sorted by start."""
    merged = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def next_permutation(nums):
    """Return the next permutation in lexicographic order, wrapping to the first."""
    items = list(nums)
    i = len(items) - 2
    while i >= 0 and items[i + 1] <= items[i]:
        i -= 1
    if i >= 0:
        j = len(items) - 1
        while items[j] <= items[i]:
            j -= 1
        items[i], items[j] = items[j], items[i]
    items[i + 1:] = reversed(items[i + 1:])
    return items


def count_inversions(values):
    """Count pairs that appear in decreasing order."""
    return sum(1 for left, right in combinations(values, 2) if left > right)


def max_profit(prices):
    """Best profit from one buy followed by one sell; 0 when no gain is possible."""
    profit = 0
    lowest = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        profit = max(profit, price - lowest)
    return profit