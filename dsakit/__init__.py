"""Classic algorithm routines: arrays, medians, recursion, backtracking, graphs and matrices."""

__version__ = "0.1.0"
__all__ = ["arrays", "arrays_advanced", "backtracking", "graphs", "matrix", "medians", "recursion"]