"""Constraint-network backtracking solver for generalised Sudoku boards."""

__version__ = "0.1.0"