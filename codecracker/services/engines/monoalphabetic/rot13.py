from typing import ClassVar

from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackResult,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.engines.base import (
    Solver,
    make_encrypt_result,
    make_result,
    shift_text,
)


class ROT13Solver(Solver):
    """
    ROT13 cipher solver.

    ROT13 is a special case of the Caesar cipher with a fixed shift of 13.
    Since 13 is exactly half of 26, applying ROT13 twice returns the original text,
    making encryption and decryption identical operations.
    """

    name = "ROT13 Cipher"
    cipher_type = CipherType.ROT13
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A special case of Caesar cipher with shift 13. "
        "Applying ROT13 twice returns the original text. "
        "Commonly used for simple obfuscation (e.g., hiding spoilers)."
    )
    can_encrypt = True

    SHIFT: ClassVar[int] = 13

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        """There is only one possibility, so no search is needed."""
        plaintext = self.transform(ciphertext)
        return [make_result(
            self.cipher_type, plaintext, self.quality(plaintext), self.SHIFT, {"shift": self.SHIFT},
        )]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        """Encrypt (same as decrypt for ROT13)."""
        return make_encrypt_result(
            self.cipher_type, self.transform(plaintext), self.SHIFT, {"shift": self.SHIFT},
        )

    def transform(self, text: str) -> str:
        """Apply ROT13 transformation (works for both encrypt and decrypt)."""
        return shift_text(text, self.SHIFT)
