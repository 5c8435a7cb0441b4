from typing import ClassVar

from codecracker.core.exceptions import InvalidKeyError
from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackResult,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.engines.base import (
    Solver,
    key_as_text,
    make_encrypt_result,
    make_result,
    shift_text,
)


class CaesarSolver(Solver):
    """
    Caesar cipher solver.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. With only 25 non-trivial keys, it can be broken by
    trying every shift and scoring each result.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )
    can_encrypt = True

    DEFAULT_SHIFT: ClassVar[int] = 3

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        """Try all 25 shifts and return the best scoring candidates."""
        candidates = []
        for shift in range(1, 26):
            plaintext = shift_text(ciphertext, -shift)
            candidates.append((self.quality(plaintext), shift, plaintext))

        # Stable on score so equal scores keep the lower shift first
        candidates.sort(key=lambda c: c[0], reverse=True)

        return [
            make_result(self.cipher_type, plaintext, score, shift, {"shift": shift})
            for score, shift, plaintext in candidates[:self.max_results(options)]
        ]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        """Encrypt plaintext with the given shift (default 3)."""
        shift = self._parse_key(options.key if options else None)
        return make_encrypt_result(
            self.cipher_type, shift_text(plaintext, shift), shift, {"shift": shift},
        )

    def _parse_key(self, key: str | bytes | None) -> int:
        """Parse key to an integer shift value."""
        text = key_as_text(key)
        if text is None or text == "":
            return self.DEFAULT_SHIFT
        try:
            return int(text.strip())
        except ValueError:
            raise InvalidKeyError(self.cipher_type.value, "a numeric key for encryption") from None
