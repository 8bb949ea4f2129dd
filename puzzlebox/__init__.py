"""Solvers for grid, string and counting puzzles, one module per puzzle."""

__version__ = "0.1.0"

__all__ = ["beams", "dish", "galaxies", "lenses", "mirrors", "pipes", "springs"]