"""Binary-to-text encoding solvers."""

from codecracker.services.engines.encoding.base32 import Base32Solver
from codecracker.services.engines.encoding.base64 import Base64Solver
from codecracker.services.engines.encoding.binary import BinarySolver
from codecracker.services.engines.encoding.hex import HexSolver
from codecracker.services.engines.encoding.morse import MorseSolver
from codecracker.services.engines.encoding.url import UrlEncodingSolver

__all__ = [
    "Base64Solver",
    "Base32Solver",
    "HexSolver",
    "BinarySolver",
    "UrlEncodingSolver",
    "MorseSolver",
]
