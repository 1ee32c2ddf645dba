"""More array algorithms: sums, subsets, partitions and counting problems."""

import math
from collections import Counter
from itertools import accumulate


def count_pairs_with_sum(values, target):
    """Count unordered pairs of distinct positions whose values add up to target."""
    counts = Counter(values)
    total = 0
    for value in values:
        complement = target - value
        matches = counts.get(complement, 0)
        if matches:
            total += matches
            if complement == value:
                total -= 1
    return total // 2


def _common_distinct(first, second):
    """Yield each value present in both sorted sequences once, in order."""
    i = j = 0
    last = None
    found_any = False
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            if not found_any or last != first[i]:
                last = first[i]
                found_any = True
                yield first[i]
            i += 1
            j += 1


def common_elements(a, b, c):
    """Return the distinct values found in all three sorted sequences, in order."""
    return list(_common_distinct(list(_common_distinct(a, b)), c))


def _in_place(items, index):
    if index % 2 == 0:
        return items[index] > 0
    return items[index] < 0


def alternate_signs(values):
    """Arrange values as positive, negative, positive, ... keeping relative order.

    Values left over once one sign runs out stay at the end in their order.
    """
    items = list(values)
    for i in range(len(items)):
        if _in_place(items, i):
            continue
        opposite = next(
            (j for j in range(i + 1, len(items)) if items[i] * items[j] < 0), None
        )
        if opposite is None:
            break
        items[i:opposite + 1] = [items[opposite]] + items[i:opposite]
    return items


def has_zero_sum_subarray(values):
    """Tell whether some non-empty contiguous run sums to zero."""
    seen = set()
    for total in accumulate(values):
        if total == 0 or total in seen:
            return True
        seen.add(total)
    return False


def big_factorial(n):
    """Return n! written out in decimal digits."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return str(math.factorial(n))


def max_product_subarray(values):
    """Return the largest product of a non-empty contiguous run."""
    items = list(values)
    if not items:
        raise ValueError("max_product_subarray() needs at least one value")
    best = lowest = highest = items[0]
    for value in items[1:]:
        if value < 0:
            lowest, highest = highest, lowest
        lowest = min(value, value * lowest)
        highest = max(value, value * highest)
        best = max(best, highest)
    return best


def longest_consecutive_run(values):
    """Length of the longest run of consecutive integers present among the values."""
    present = set(values)
    if not present:
        raise ValueError("longest_consecutive_run() needs at least one value")
    longest = 1
    for start in present:
        if start - 1 in present:
            continue
        length = 1
        while start + length in present:
            length += 1
        longest = max(longest, length)
    return longest


def frequent_elements(values, k):
    """Return (value, count) pairs for values occurring more than len(values) // k times.

    Candidates are found with k - 1 counters and then verified; nothing is
    returned when k is below 2.
    """
    items = list(values)
    if k < 2:
        return []
    slots = [[None, 0] for _ in range(k - 1)]
    for value in items:
        held = next((slot for slot in slots if slot[1] >= 0 and slot[0] == value
                     and slot[0] is not None), None)
        if held is not None:
            held[1] += 1
            continue
        free = next((slot for slot in slots if slot[1] == 0), None)
        if free is not None:
            free[0] = value
            free[1] = 1
        else:
            for slot in slots:
                slot[1] -= 1
    threshold = len(items) // k
    result = []
    for candidate, _ in slots:
        if candidate is None:
            continue
        actual = items.count(candidate)
        if actual > threshold:
            result.append((candidate, actual))
    return result


def _prefix_best_profits(prices):
    lowest = prices[0]
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
        yield best


def _suffix_best_profits(prices):
    highest = prices[-1]
    best = 0
    profits = []
    for price in reversed(prices):
        highest = max(highest, price)
        best = max(best, highest - price)
        profits.append(best)
    profits.reverse()
    return profits


def max_profit_two_transactions(prices):
    """Best profit from at most two non-overlapping buy-then-sell trades."""
    prices = list(prices)
    if len(prices) < 2:
        return 0
    return max(
        before + after
        for before, after in zip(_prefix_best_profits(prices), _suffix_best_profits(prices))
    )


def is_subset(superset, subset):
    """Tell whether every value of subset, with repeats, occurs in superset."""
    return not Counter(subset) - Counter(superset)


def has_triplet_with_sum(values, target):
    """Tell whether three values at distinct positions add up to target."""
    items = sorted(values)
    for i, first in enumerate(items[:-2]):
        left, right = i + 1, len(items) - 1
        while left < right:
            total = first + items[left] + items[right]
            if total > target:
                right -= 1
            elif total < target:
                left += 1
            else:
                return True
    return False


def trapped_water(heights):
    """Units of rain water held between bars of the given heights."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] >= left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] >= right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def min_chocolate_spread(packets, students):
    """Smallest gap between largest and smallest packet handed to the students."""
    ordered = sorted(packets)
    if students < 1:
        raise ValueError("there must be at least one student")
    if students > len(ordered):
        raise ValueError("not enough packets for every student")
    return min(
        high - low for low, high in zip(ordered, ordered[students - 1:])
    )


def smallest_subarray_above(values, threshold):
    """Length of the shortest contiguous run whose sum exceeds threshold, or 0."""
    items = list(values)
    best = None
    for start in range(len(items)):
        if best == 1:
            break
        for length, total in enumerate(accumulate(items[start:]), 1):
            if total > threshold:
                best = length if best is None else min(best, length)
                break
    return best or 0


def three_way_partition(values, low, high):
    """Return a copy with values below low first, then those in range, then those above high."""
    items = list(values)
    start, mid, end = 0, 0, len(items) - 1
    while mid <= end:
        if items[mid] < low:
            items[start], items[mid] = items[mid], items[start]
            start += 1
            mid += 1
        elif items[mid] > high:
            items[mid], items[end] = items[end], items[mid]
            end -= 1
        else:
            mid += 1
    return items


def min_swaps_to_group(values, limit):
    """Fewest swaps that bring all values not above limit next to each other."""
    items = list(values)
    window = sum(1 for value in items if value <= limit)
    bad = sum(1 for value in items[:window] if value > limit)
    best = bad
    for start in range(1, len(items) - window + 1):
        if items[start - 1] > limit:
            bad -= 1
        if items[start + window - 1] > limit:
            bad += 1
        best = min(best, bad)
    return best


def min_merges_to_palindrome(values):
    """Fewest merges of adjacent values (replacing them by their sum) to make a palindrome."""
    items = list(values)
    i, j = 0, len(items) - 1
    merges = 0
    while i < j:
        if items[i] < items[j]:
            i += 1
            items[i] += items[i - 1]
            merges += 1
        elif items[i] > items[j]:
            j -= 1
            items[j] += items[j + 1]
            merges += 1
        else:
            i += 1
            j -= 1
    return merges