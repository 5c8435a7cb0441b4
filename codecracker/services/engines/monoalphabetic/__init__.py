"""Monoalphabetic cipher solvers."""

from codecracker.services.engines.monoalphabetic.atbash import AtbashSolver
from codecracker.services.engines.monoalphabetic.caesar import CaesarSolver
from codecracker.services.engines.monoalphabetic.rot13 import ROT13Solver
from codecracker.services.engines.monoalphabetic.simple_substitution import SubstitutionSolver

__all__ = [
    "CaesarSolver",
    "ROT13Solver",
    "AtbashSolver",
    "SubstitutionSolver",
]
