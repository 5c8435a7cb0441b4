import base64
import binascii
import re
from typing import ClassVar

from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes
from Crypto.Util.Padding import pad, unpad

from codecracker.core.exceptions import InvalidKeyError
from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackResult,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.analysis.statistics import printable_ratio
from codecracker.services.engines.base import (
    Solver,
    make_encrypt_result,
    make_result,
    printable_or_none,
)

_HEX_KEY = re.compile(r"^[0-9a-fA-F]{64}$")
_HEX = re.compile(r"^[0-9a-fA-F]+$")
_BASE64 = re.compile(r"^[A-Za-z0-9+/]+=*$")
_WHITESPACE = re.compile(r"\s+")


class AESSolver(Solver):
    """
    AES-256-CBC decryption with a known key.

    The ciphertext may be base64 or hex; both readings are tried. Without an
    explicit IV the first block of the ciphertext is taken as the IV. Any
    failure (wrong key, bad padding, unprintable output) yields no result.
    """

    name = "AES-256-CBC"
    cipher_type = CipherType.AES
    cipher_family = CipherFamily.MODERN
    description = "Advanced Encryption Standard with a 256-bit key in CBC mode, PKCS#7 padded."
    can_encrypt = True

    KEY_SIZE: ClassVar[int] = 32
    IV_SIZE: ClassVar[int] = AES.block_size
    ALGORITHM: ClassVar[str] = "AES-256-CBC"

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        if options is None or not options.key:
            return []

        text = _WHITESPACE.sub("", ciphertext)
        key = self._key_bytes(options.key)
        if not text or len(key) != self.KEY_SIZE:
            return []

        results = []
        for encoding, data in (("base64", self._from_base64(text)), ("hex", self._from_hex(text))):
            result = self._try_decrypt(data, key, options.iv, encoding)
            if result is not None:
                results.append(result)
        return results

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        key = self._key_bytes(options.key) if options and options.key else b""
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyError(
                self.cipher_type.value, "a 32-byte key (raw or 64 hex characters) for encryption",
            )

        iv = self._iv_bytes(options.iv) if options.iv else get_random_bytes(self.IV_SIZE)
        if iv is None or len(iv) != self.IV_SIZE:
            raise InvalidKeyError(self.cipher_type.value, "a 16-byte IV")

        cipher = AES.new(key, AES.MODE_CBC, iv)
        data = cipher.encrypt(pad(plaintext.encode("utf-8"), AES.block_size))
        # A supplied IV is known to the receiver; a generated one is prepended
        payload = data if options.iv else iv + data

        return make_encrypt_result(
            self.cipher_type,
            base64.b64encode(payload).decode("ascii"),
            details={
                "algorithm": self.ALGORITHM,
                "iv": iv.hex(),
                "iv_source": "provided" if options.iv else "prepended",
            },
        )

    def _try_decrypt(
        self,
        data: bytes | None,
        key: bytes,
        iv_option: str | bytes | None,
        encoding: str,
    ) -> CrackResult | None:
        if not data:
            return None

        if iv_option:
            iv = self._iv_bytes(iv_option)
            body = data
        else:
            if len(data) <= self.IV_SIZE:
                return None
            iv, body = data[:self.IV_SIZE], data[self.IV_SIZE:]

        if iv is None or len(iv) != self.IV_SIZE:
            return None
        if not body or len(body) % AES.block_size != 0:
            return None

        try:
            decrypted = unpad(AES.new(key, AES.MODE_CBC, iv).decrypt(body), AES.block_size)
        except ValueError:
            return None

        plaintext = printable_or_none(decrypted)
        if plaintext is None:
            return None

        return make_result(
            self.cipher_type, plaintext, printable_ratio(plaintext),
            details={
                "algorithm": self.ALGORITHM,
                "input_encoding": encoding,
                "iv_source": "provided" if iv_option else "extracted-from-ciphertext",
            },
        )

    def _key_bytes(self, key: str | bytes) -> bytes:
        if isinstance(key, bytes):
            return key
        if _HEX_KEY.match(key):
            return bytes.fromhex(key)
        return key.encode("utf-8")

    def _iv_bytes(self, iv: str | bytes) -> bytes | None:
        if isinstance(iv, bytes):
            return iv
        try:
            return bytes.fromhex(iv)
        except ValueError:
            return None

    def _from_base64(self, text: str) -> bytes | None:
        if not _BASE64.match(text):
            return None
        try:
            return base64.b64decode(text)
        except binascii.Error:
            return None

    def _from_hex(self, text: str) -> bytes | None:
        if len(text) % 2 != 0 or not _HEX.match(text):
            return None
        return bytes.fromhex(text)
