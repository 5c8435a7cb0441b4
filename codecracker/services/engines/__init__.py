"""Cipher solvers and the registry that maps cipher types to them."""

from codecracker.services.engines.base import Solver
from codecracker.services.engines.encoding import (
    Base32Solver,
    Base64Solver,
    BinarySolver,
    HexSolver,
    MorseSolver,
    UrlEncodingSolver,
)
from codecracker.services.engines.modern import AESSolver, HashLookupSolver, RSASolver, XorSolver
from codecracker.services.engines.monoalphabetic import (
    AtbashSolver,
    CaesarSolver,
    ROT13Solver,
    SubstitutionSolver,
)
from codecracker.services.engines.polyalphabetic import VigenereSolver
from codecracker.services.engines.polygraphic import PlayfairSolver
from codecracker.services.engines.registry import SolverRegistry
from codecracker.services.engines.transposition import ColumnarSolver, RailFenceSolver
from codecracker.services.pipeline.scorer import PlaintextScorer

BUILTIN_SOLVERS: list[type[Solver]] = [
    CaesarSolver,
    ROT13Solver,
    AtbashSolver,
    VigenereSolver,
    SubstitutionSolver,
    RailFenceSolver,
    PlayfairSolver,
    ColumnarSolver,
    Base64Solver,
    Base32Solver,
    HexSolver,
    BinarySolver,
    UrlEncodingSolver,
    MorseSolver,
    XorSolver,
    HashLookupSolver,
    AESSolver,
    RSASolver,
]


def builtin_solvers(scorer: PlaintextScorer | None = None) -> list[Solver]:
    """One instance of every built-in solver, sharing ``scorer``."""
    return [solver_cls(scorer) for solver_cls in BUILTIN_SOLVERS]


def create_default_registry(scorer: PlaintextScorer | None = None) -> SolverRegistry:
    """A fresh registry holding all built-in solvers."""
    return SolverRegistry(builtin_solvers(scorer))


__all__ = [
    "Solver",
    "SolverRegistry",
    "BUILTIN_SOLVERS",
    "builtin_solvers",
    "create_default_registry",
]
