"""Recursive solutions to classic optimisation problems."""

from functools import lru_cache


def knapsack(values, weights, capacity):
    """Return the best total value of a 0/1 choice of items that fits in capacity."""
    values = tuple(values)
    weights = tuple(weights)
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")

    @lru_cache(maxsize=None)
    def best(count, room):
        if count == 0 or room == 0:
            return 0
        weight = weights[count - 1]
        without = best(count - 1, room)
        if weight > room:
            return without
        return max(best(count - 1, room - weight) + values[count - 1], without)

    return best(len(values), capacity)