"""Modern cipher solvers."""

from codecracker.services.engines.modern.aes import AESSolver
from codecracker.services.engines.modern.hash_lookup import HashLookupSolver
from codecracker.services.engines.modern.rsa import RSASolver
from codecracker.services.engines.modern.xor import XorSolver

__all__ = [
    "XorSolver",
    "HashLookupSolver",
    "AESSolver",
    "RSASolver",
]
