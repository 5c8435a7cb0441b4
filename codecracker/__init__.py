"""
CodeCracker - identify and crack ciphers and encodings.

Module-level functions use a process-wide orchestrator holding the built-in
solvers. Build a CrackOrchestrator directly for an isolated registry.
"""

from codecracker.core.exceptions import (
    CryptanalysisError,
    EmptyInputError,
    EncryptionNotSupportedError,
    InvalidKeyError,
    SolverError,
    SolverNotFoundError,
    ValidationError,
)
from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackOptions,
    CrackResponse,
    CrackResult,
    DetectionCandidate,
    EncryptResult,
    PlaintextScore,
    SolverOptions,
)
from codecracker.services.engines.base import Solver
from codecracker.services.pipeline.orchestrator import CrackOrchestrator, get_orchestrator
from codecracker.services.pipeline.scorer import PlaintextScorer, final_confidence

__version__ = "0.1.0"


def crack(ciphertext: str, options: CrackOptions | None = None) -> CrackResponse:
    """Detect the cipher and return ranked plaintext candidates."""
    return get_orchestrator().crack(ciphertext, options)


def decrypt(
    ciphertext: str,
    cipher_type: CipherType | str,
    options: SolverOptions | None = None,
) -> list[CrackResult]:
    """Decrypt with a known cipher type."""
    return get_orchestrator().decrypt(ciphertext, cipher_type, options)


def encrypt(
    plaintext: str,
    cipher_type: CipherType | str,
    options: SolverOptions | None = None,
) -> EncryptResult:
    """Encrypt with a cipher type that supports encryption."""
    return get_orchestrator().encrypt(plaintext, cipher_type, options)


def detect(ciphertext: str) -> list[DetectionCandidate]:
    """Likely cipher types, most confident first."""
    return get_orchestrator().detect(ciphertext)


def register_solver(solver: Solver) -> Solver:
    """Add or replace the solver for ``solver.cipher_type``."""
    return get_orchestrator().register_solver(solver)


def get_encryptable_cipher_types() -> list[CipherType]:
    return get_orchestrator().get_encryptable_cipher_types()


__all__ = [
    "crack",
    "decrypt",
    "encrypt",
    "detect",
    "register_solver",
    "get_encryptable_cipher_types",
    "final_confidence",
    "CrackOrchestrator",
    "PlaintextScorer",
    "Solver",
    "CipherFamily",
    "CipherType",
    "CrackOptions",
    "CrackResponse",
    "CrackResult",
    "DetectionCandidate",
    "EncryptResult",
    "PlaintextScore",
    "SolverOptions",
    "CryptanalysisError",
    "ValidationError",
    "EmptyInputError",
    "SolverError",
    "SolverNotFoundError",
    "EncryptionNotSupportedError",
    "InvalidKeyError",
]
