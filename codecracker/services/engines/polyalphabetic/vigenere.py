from typing import ClassVar

from codecracker.core.exceptions import InvalidKeyError
from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackResult,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.analysis.statistics import (
    alpha_only,
    chi_squared_vs_english,
    kasiski_examination,
)
from codecracker.services.engines.base import (
    Solver,
    key_as_text,
    make_encrypt_result,
    make_result,
    shift_letter,
)


class VigenereSolver(Solver):
    """
    Vigenère cipher solver.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.

    Breaking involves:
    1. Finding key length using Kasiski examination
    2. Breaking each Caesar column independently with chi-squared fitting
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword. More secure than Caesar but vulnerable to "
        "Kasiski examination and frequency analysis per key position."
    )
    can_encrypt = True

    MIN_LETTERS: ClassVar[int] = 10
    MAX_KEY_LENGTH_CANDIDATES: ClassVar[int] = 8
    FALLBACK_KEY_LENGTHS: ClassVar[list[int]] = list(range(2, 11))

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        if options is not None and options.key:
            key = self._parse_key(options.key)
            if not key:
                return []
            plaintext = self._decrypt(ciphertext, key)
            return [make_result(
                self.cipher_type, plaintext, self.quality(plaintext), key,
                {"key_length": len(key)},
            )]

        letters = alpha_only(ciphertext).lower()
        if len(letters) < self.MIN_LETTERS:
            return []

        candidates = []
        for key_length in self._estimate_key_lengths(letters):
            key = self._find_key(letters, key_length)
            plaintext = self._decrypt(ciphertext, key)
            candidates.append((self.quality(plaintext), key, plaintext))

        candidates.sort(key=lambda c: c[0], reverse=True)

        return [
            make_result(self.cipher_type, plaintext, score, key, {"key_length": len(key)})
            for score, key, plaintext in candidates[:self.max_results(options)]
        ]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        key = self._parse_key(options.key if options else None)
        if not key:
            raise InvalidKeyError(self.cipher_type.value, "an alphabetic key for encryption")
        return make_encrypt_result(
            self.cipher_type, self._encrypt(plaintext, key), key, {"key_length": len(key)},
        )

    def _parse_key(self, key: str | bytes | None) -> str:
        """Keep only the letters of the key, lowercased."""
        return alpha_only(key_as_text(key) or "").lower()

    def _estimate_key_lengths(self, letters: str) -> list[int]:
        """Kasiski key lengths, or every length 2-10 when nothing repeats."""
        lengths = kasiski_examination(letters, min_length=0)
        if not lengths:
            return self.FALLBACK_KEY_LENGTHS
        return lengths[:self.MAX_KEY_LENGTH_CANDIDATES]

    def _find_key(self, letters: str, key_length: int) -> str:
        """
        Recover each key letter from its column.

        Every column was shifted by a single key letter, so the shift that
        brings its letter distribution closest to English wins.
        """
        key = []
        for col in range(key_length):
            column = letters[col::key_length]
            best_shift = min(
                range(26),
                key=lambda shift: chi_squared_vs_english(
                    "".join(shift_letter(c, -shift) for c in column)
                ),
            )
            key.append(chr(best_shift + 97))
        return "".join(key)

    def _transform(self, text: str, key: str, direction: int) -> str:
        """Shift each letter by the next key letter; non-letters do not consume the key."""
        result = []
        key_index = 0
        for char in text:
            if ("A" <= char <= "Z") or ("a" <= char <= "z"):
                shift = ord(key[key_index % len(key)]) - 97
                result.append(shift_letter(char, direction * shift))
                key_index += 1
            else:
                result.append(char)
        return "".join(result)

    def _encrypt(self, plaintext: str, key: str) -> str:
        return self._transform(plaintext, key, 1)

    def _decrypt(self, ciphertext: str, key: str) -> str:
        return self._transform(ciphertext, key, -1)
