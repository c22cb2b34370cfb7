"""Solvers for a December 2024 set of puzzles, one module per day."""

__version__ = "0.1.0"