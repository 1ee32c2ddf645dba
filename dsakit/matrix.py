"""Matrix algorithms: spiral order, searching and row statistics."""

from bisect import bisect_right


def spiral_order(matrix):
    """Return the entries of a rectangular matrix in clockwise spiral order."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        return []
    top, bottom = 0, len(rows) - 1
    left, right = 0, len(rows[0]) - 1
    result = []
    while left <= right:
        result.extend(rows[top][left:right + 1])
        top += 1
        if top > bottom:
            break
        result.extend(rows[i][right] for i in range(top, bottom + 1))
        right -= 1
        if left > right:
            break
        result.extend(reversed(rows[bottom][left:right + 1]))
        bottom -= 1
        if top > bottom:
            break
        result.extend(rows[i][left] for i in range(bottom, top - 1, -1))
        left += 1
    return result


def search_sorted_matrix(matrix, target):
    """Tell whether target occurs in a matrix whose rows, read in turn, are sorted."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        return False
    width = len(rows[0])
    low, high = 0, len(rows) * width - 1
    while low <= high:
        mid = (low + high) // 2
        r, c = divmod(mid, width)
        value = rows[r][c]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def median_of_sorted_rows(matrix):
    """Median of a matrix whose rows are each sorted, found by binary search on values.

    For an even count of entries the lower middle value is returned.
    """
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must not be empty")
    low = min(row[0] for row in rows)
    high = max(row[-1] for row in rows)
    required = (len(rows) * len(rows[0]) + 1) // 2
    while low < high:
        mid = low + (high - low) // 2
        place = sum(bisect_right(row, mid) for row in rows)
        if place < required:
            low = mid + 1
        else:
            high = mid
    return low


def row_with_most_ones(matrix):
    """Index of the first row with the most 1s in a matrix of sorted 0/1 rows.

    Returns None when the matrix holds no 1 at all.
    """
    best = None
    edge = None
    for index, row in enumerate(matrix):
        row = list(row)
        start = len(row) if edge is None else edge
        column = start
        while column > 0 and row[column - 1] == 1:
            column -= 1
        if column < start:
            best = index
            edge = column
        elif edge is None:
            edge = start
    return best