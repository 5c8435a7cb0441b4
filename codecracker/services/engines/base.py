from abc import ABC, abstractmethod
from typing import Any, ClassVar

from codecracker.core.exceptions import EncryptionNotSupportedError
from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackResult,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.analysis.statistics import printable_ratio
from codecracker.services.pipeline.scorer import PlaintextScorer, get_default_scorer


class Solver(ABC):
    """
    Abstract base class for all cipher solvers.

    Each solver must provide:
    - solve(): Decode or crack ciphertext, returning ranked candidates.
      Malformed input yields an empty list, never an exception.

    Solvers that set ``can_encrypt`` also override encrypt().
    """

    # Solver metadata
    name: ClassVar[str]
    cipher_type: ClassVar[CipherType]
    cipher_family: ClassVar[CipherFamily]
    description: ClassVar[str] = ""
    can_encrypt: ClassVar[bool] = False

    DEFAULT_MAX_RESULTS: ClassVar[int] = 5

    def __init__(self, scorer: PlaintextScorer | None = None):
        self.scorer = scorer or get_default_scorer()

    @abstractmethod
    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        """
        Attempt to recover plaintext.

        Args:
            ciphertext: The ciphertext to decode or crack
            options: Optional key, IV and result cap

        Returns:
            Candidates, best first
        """
        pass

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        """
        Encrypt plaintext.

        Args:
            plaintext: The plaintext to encrypt
            options: Key and IV where the cipher needs them

        Returns:
            EncryptResult with the ciphertext and the key used
        """
        raise EncryptionNotSupportedError(self.cipher_type.value)

    def quality(self, plaintext: str) -> float:
        """Total quality score of a candidate plaintext."""
        return self.scorer.score(plaintext).total

    def max_results(self, options: SolverOptions | None) -> int:
        if options is not None and options.max_results:
            return options.max_results
        return self.DEFAULT_MAX_RESULTS

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cipher_type={self.cipher_type.value!r})"


def make_result(
    cipher_type: CipherType,
    plaintext: str,
    confidence: float,
    key: str | int | None = None,
    details: dict[str, Any] | None = None,
) -> CrackResult:
    """Build a CrackResult with the confidence clamped to [0, 1]."""
    return CrackResult(
        plaintext=plaintext,
        cipher_type=cipher_type,
        confidence=min(1.0, max(0.0, confidence)),
        key=key,
        details=details or {},
    )


def make_encrypt_result(
    cipher_type: CipherType,
    ciphertext: str,
    key: str | int | None = None,
    details: dict[str, Any] | None = None,
) -> EncryptResult:
    """Build an EncryptResult."""
    return EncryptResult(
        ciphertext=ciphertext,
        cipher_type=cipher_type,
        key=key,
        details=details or {},
    )


def key_as_text(key: str | bytes | None) -> str | None:
    """Key as text; raw bytes are decoded as UTF-8."""
    if key is None:
        return None
    if isinstance(key, bytes):
        return key.decode("utf-8", errors="replace")
    return key


def shift_letter(char: str, shift: int) -> str:
    """Shift an ASCII letter within its case; anything else passes through."""
    if "A" <= char <= "Z":
        return chr((ord(char) - 65 + shift) % 26 + 65)
    if "a" <= char <= "z":
        return chr((ord(char) - 97 + shift) % 26 + 97)
    return char


def shift_text(text: str, shift: int) -> str:
    """Caesar-shift every ASCII letter of ``text`` by ``shift``."""
    return "".join(shift_letter(char, shift) for char in text)


def printable_or_none(data: bytes, threshold: float = 0.8) -> str | None:
    """Decode bytes as UTF-8 and keep the text only if it is mostly printable."""
    text = data.decode("utf-8", errors="replace")
    if not text or printable_ratio(text) < threshold:
        return None
    return text
