import re

from codecracker.core.exceptions import InvalidKeyError
from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackResult,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.engines.base import Solver, make_encrypt_result, make_result

_HEX = re.compile(r"^[0-9a-fA-F]+$")
_WHITESPACE = re.compile(r"\s+")


def xor_bytes(data: bytes, key: bytes) -> bytes:
    """XOR ``data`` with a repeating ``key``."""
    return bytes(b ^ key[i % len(key)] for i, b in enumerate(data))


class XorSolver(Solver):
    """
    Repeating-key XOR solver.

    Input is read as hex when it looks like hex, otherwise as UTF-8 bytes.
    With a key the data is XORed directly; without one every non-zero
    single-byte key is tried.
    """

    name = "XOR Cipher"
    cipher_type = CipherType.XOR
    cipher_family = CipherFamily.MODERN
    description = "Each byte XORed with a (repeating) key byte."
    can_encrypt = True

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        data = self._to_bytes(ciphertext.strip())
        if not data:
            return []

        if options is not None and options.key:
            return self._decrypt_with_key(data, options.key)

        candidates = []
        for key_byte in range(0x01, 0x100):
            plaintext = bytes(b ^ key_byte for b in data).decode("utf-8", errors="replace")
            candidates.append((self.quality(plaintext), key_byte, plaintext))

        candidates.sort(key=lambda c: c[0], reverse=True)

        return [
            make_result(
                self.cipher_type, plaintext, score, f"0x{key_byte:02x}",
                {"method": "single-byte-bruteforce", "key_byte": key_byte},
            )
            for score, key_byte, plaintext in candidates[:self.max_results(options)]
        ]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        key = options.key if options else None
        key_bytes = self._key_bytes(key) if key else b""
        if not key_bytes:
            raise InvalidKeyError(self.cipher_type.value, "a key for encryption")

        ciphertext = xor_bytes(plaintext.encode("utf-8"), key_bytes).hex()
        return make_encrypt_result(
            self.cipher_type, ciphertext, self._key_display(key),
            {"key_length": len(key_bytes), "output": "hex"},
        )

    def _decrypt_with_key(self, data: bytes, key: str | bytes) -> list[CrackResult]:
        key_bytes = self._key_bytes(key)
        if not key_bytes:
            return []
        plaintext = xor_bytes(data, key_bytes).decode("utf-8", errors="replace")
        return [make_result(
            self.cipher_type, plaintext, self.quality(plaintext), self._key_display(key),
            {"method": "known-key", "key_length": len(key_bytes)},
        )]

    def _to_bytes(self, text: str) -> bytes:
        stripped = _WHITESPACE.sub("", text)
        if stripped and len(stripped) % 2 == 0 and _HEX.match(stripped):
            return bytes.fromhex(stripped)
        return text.encode("utf-8")

    def _key_bytes(self, key: str | bytes) -> bytes:
        return key if isinstance(key, bytes) else key.encode("utf-8")

    def _key_display(self, key: str | bytes) -> str:
        return key.hex() if isinstance(key, bytes) else key
