"""Backtracking searches: a rat in a maze and the n-queens puzzle."""


def solve_maze(maze):
    """Find a path from the top-left to the bottom-right corner of a square maze.

    Open cells hold 1 and the rat moves only down or right. Returns a grid of
    the same size with the path marked by 1s, or None when no path exists.
    The destination cell counts as reached as soon as the rat steps on it.
    """
    grid = [list(row) for row in maze]
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("maze must be square")
    path = [[0] * size for _ in range(size)]

    def walk(x, y):
        if x == size - 1 and y == size - 1:
            path[x][y] = 1
            return True
        if x < size and y < size and grid[x][y] == 1:
            path[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            path[x][y] = 0
        return False

    return path if walk(0, 0) else None


def n_queens(n):
    """Return every placement of n non-attacking queens on an n x n board.

    Each board is a list of rows holding 1 where a queen stands and 0
    elsewhere. Boards come in the order a row-by-row, left-to-right search
    finds them.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions = []
    columns = []

    def is_safe(col):
        row = len(columns)
        return all(
            col != placed and abs(col - placed) != row - placed_row
            for placed_row, placed in enumerate(columns)
        )

    def place(row):
        if row == n:
            solutions.append([[int(c == col) for c in range(n)] for col in columns])
            return
        for col in range(n):
            if is_safe(col):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return solutions


def render_board(board):
    """Render a board as lines of space-separated cells."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in board)