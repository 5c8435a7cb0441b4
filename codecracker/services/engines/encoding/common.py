from abc import abstractmethod
from typing import ClassVar

from codecracker.models.schemas import (
    CipherFamily,
    CrackResult,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.analysis.statistics import printable_ratio
from codecracker.services.engines.base import Solver, make_encrypt_result, make_result


class EncodingSolver(Solver):
    """
    Base class for deterministic binary-to-text encodings.

    Subclasses implement decode() and encode(). decode() returns None when
    the input does not have the encoding's shape; a decoded result is only
    reported when it is mostly printable, with the printable ratio as its
    confidence.
    """

    cipher_family = CipherFamily.ENCODING
    can_encrypt = True

    PRINTABLE_THRESHOLD: ClassVar[float] = 0.8

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        decoded = self.decode(ciphertext.strip())
        if not decoded:
            return []

        ratio = printable_ratio(decoded)
        if ratio < self.PRINTABLE_THRESHOLD:
            return []

        return [make_result(
            self.cipher_type, decoded, ratio, details={"encoding": self.cipher_type.value},
        )]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        return make_encrypt_result(
            self.cipher_type, self.encode(plaintext), details={"encoding": self.cipher_type.value},
        )

    @abstractmethod
    def decode(self, text: str) -> str | None:
        """Decode trimmed input, or None if it is not in this encoding."""
        pass

    @abstractmethod
    def encode(self, text: str) -> str:
        pass


def bytes_to_text(data: bytes) -> str:
    """Decode as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")
