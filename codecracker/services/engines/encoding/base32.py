import base64
import binascii
import re

from codecracker.models.schemas import CipherType
from codecracker.services.engines.encoding.common import EncodingSolver, bytes_to_text

_BASE32 = re.compile(r"^[A-Z2-7]+=*$")


def canonical_padding(text: str) -> str:
    """
    Re-pad base32 so that it holds only the characters of whole bytes.

    Trailing characters that cannot complete a byte are dropped, so
    ``"MZXW6Y=="`` becomes ``"MZXW6==="``.
    """
    data = text.rstrip("=")
    byte_count = len(data) * 5 // 8
    kept_chars = -(-byte_count * 8 // 5)
    data = data[:kept_chars]
    return data + "=" * (-len(data) % 8)


class Base32Solver(EncodingSolver):
    """Base32 (RFC 4648 alphabet ``A-Z2-7``), padded to a multiple of 8."""

    name = "Base32"
    cipher_type = CipherType.BASE32
    description = "Binary-to-text encoding using 32 characters, 5 bits per character."

    def decode(self, text: str) -> str | None:
        text = text.upper()
        if not text or len(text) % 8 != 0 or not _BASE32.match(text):
            return None
        text = canonical_padding(text)
        if not text:
            return None
        try:
            return bytes_to_text(base64.b32decode(text))
        except binascii.Error:
            return None

    def encode(self, text: str) -> str:
        return base64.b32encode(text.encode("utf-8")).decode("ascii")
