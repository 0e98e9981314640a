"""Solvers for thirteen days of two-part grid, number and parsing puzzles."""

__version__ = "0.1.0"