import base64
import binascii
from typing import ClassVar

from Crypto.Cipher import PKCS1_OAEP
from Crypto.PublicKey import RSA

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
)


class RSASolver(Solver):
    """
    RSA-OAEP decryption with a known PEM private key.

    Ciphertext is base64. Any failure (malformed key or input, wrong key)
    yields no result.
    """

    name = "RSA"
    cipher_type = CipherType.RSA
    cipher_family = CipherFamily.MODERN
    description = "RSA public-key encryption with OAEP padding."
    can_encrypt = True

    CONFIDENCE: ClassVar[float] = 0.95
    DETAILS: ClassVar[dict[str, str]] = {"algorithm": "RSA", "padding": "PKCS1_OAEP"}

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        if options is None or not options.key:
            return []

        try:
            data = base64.b64decode(ciphertext.strip())
        except (binascii.Error, ValueError):
            return []
        if not data:
            return []

        try:
            key = RSA.import_key(key_as_text(options.key))
            decrypted = PKCS1_OAEP.new(key).decrypt(data)
        except (ValueError, TypeError, IndexError):
            return []

        plaintext = decrypted.decode("utf-8", errors="replace")
        if not plaintext:
            return []

        return [make_result(self.cipher_type, plaintext, self.CONFIDENCE, details=dict(self.DETAILS))]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        if options is None or not options.key:
            raise InvalidKeyError(self.cipher_type.value, "a public key for encryption")

        try:
            key = RSA.import_key(key_as_text(options.key)).public_key()
        except (ValueError, IndexError, TypeError) as e:
            raise InvalidKeyError(self.cipher_type.value, "a PEM-encoded RSA key") from e

        try:
            data = PKCS1_OAEP.new(key).encrypt(plaintext.encode("utf-8"))
        except ValueError as e:
            raise InvalidKeyError(
                self.cipher_type.value, "a key large enough for the plaintext",
            ) from e

        return make_encrypt_result(
            self.cipher_type, base64.b64encode(data).decode("ascii"), details=dict(self.DETAILS),
        )
