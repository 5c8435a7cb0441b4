"""Transposition cipher solvers."""

from codecracker.services.engines.transposition.columnar import ColumnarSolver
from codecracker.services.engines.transposition.rail_fence import RailFenceSolver

__all__ = [
    "RailFenceSolver",
    "ColumnarSolver",
]
