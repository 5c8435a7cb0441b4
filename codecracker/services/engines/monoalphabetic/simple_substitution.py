import string
from typing import ClassVar

from codecracker.core.exceptions import InvalidKeyError
from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackResult,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.analysis.frequencies import ENGLISH_FREQ_ORDER
from codecracker.services.analysis.statistics import letter_counts
from codecracker.services.engines.base import (
    Solver,
    key_as_text,
    make_encrypt_result,
    make_result,
)


class SubstitutionSolver(Solver):
    """
    Simple Substitution cipher solver.

    Each letter is replaced with another letter according to a fixed permutation
    of the alphabet. The key is written as a 26-letter cipher alphabet: plaintext
    ``a`` encrypts to ``key[0]``, ``b`` to ``key[1]`` and so on.

    Without a key only an initial frequency-analysis mapping is produced.
    """

    name = "Simple Substitution Cipher"
    cipher_type = CipherType.SUBSTITUTION
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "Each letter is mapped to a different letter using a random permutation. "
        "With 26! (about 4 x 10^26) possible keys, brute force is impossible; "
        "frequency analysis gives a starting mapping."
    )
    can_encrypt = True

    ALPHABET: ClassVar[str] = string.ascii_lowercase

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        key = self._parse_key(options.key if options else None)
        if key is not None:
            mapping = dict(zip(key, self.ALPHABET))
            plaintext = self._apply(ciphertext, mapping)
            return [make_result(
                self.cipher_type, plaintext, self.quality(plaintext), key,
                {"method": "substitution"},
            )]

        mapping = self._frequency_mapping(ciphertext)
        plaintext = self._apply(ciphertext, mapping)
        return [make_result(
            self.cipher_type,
            plaintext,
            self.quality(plaintext),
            self._mapping_to_key(mapping),
            {
                "method": "frequency-analysis",
                "note": "Initial frequency-based mapping; may need refinement",
            },
        )]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        key = self._parse_key(options.key if options else None)
        if key is None:
            raise InvalidKeyError(self.cipher_type.value, "a 26-character key for encryption")
        ciphertext = self._apply(plaintext, dict(zip(self.ALPHABET, key)))
        return make_encrypt_result(self.cipher_type, ciphertext, key, {"method": "substitution"})

    def _parse_key(self, key: str | bytes | None) -> str | None:
        """Lowercased 26-letter key alphabet, or None if the key does not qualify."""
        text = key_as_text(key)
        if text is None or len(text) != 26:
            return None
        return text.lower()

    def _frequency_mapping(self, ciphertext: str) -> dict[str, str]:
        """Pair cipher letters, most frequent first, with English frequency order."""
        counts = letter_counts(ciphertext)
        by_frequency = sorted(range(26), key=lambda i: counts[i], reverse=True)
        return {
            self.ALPHABET[index]: ENGLISH_FREQ_ORDER[rank]
            for rank, index in enumerate(by_frequency)
        }

    def _mapping_to_key(self, mapping: dict[str, str]) -> str:
        """Express a cipher->plain mapping as the cipher alphabet for a..z."""
        reverse = {plain: cipher for cipher, plain in mapping.items()}
        return "".join(reverse.get(letter, "?") for letter in self.ALPHABET)

    def _apply(self, text: str, mapping: dict[str, str]) -> str:
        """Map each letter through ``mapping`` preserving case."""
        result = []
        for char in text:
            mapped = mapping.get(char.lower())
            if mapped is None:
                result.append(char)
            elif char.isupper():
                result.append(mapped.upper())
            else:
                result.append(mapped)
        return "".join(result)
