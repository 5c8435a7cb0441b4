"""Polygraphic cipher solvers."""

from codecracker.services.engines.polygraphic.playfair import PlayfairSolver

__all__ = [
    "PlayfairSolver",
]
