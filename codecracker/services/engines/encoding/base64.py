import base64
import binascii
import re

from codecracker.models.schemas import CipherType
from codecracker.services.engines.encoding.common import EncodingSolver, bytes_to_text

_BASE64 = re.compile(r"^[A-Za-z0-9+/]+=*$")


class Base64Solver(EncodingSolver):
    """Standard Base64 (RFC 4648) with ``=`` padding."""

    name = "Base64"
    cipher_type = CipherType.BASE64
    description = "Binary-to-text encoding using 64 printable characters, 4 characters per 3 bytes."

    def decode(self, text: str) -> str | None:
        if not text or len(text) % 4 != 0 or not _BASE64.match(text):
            return None
        try:
            return bytes_to_text(base64.b64decode(text))
        except binascii.Error:
            return None

    def encode(self, text: str) -> str:
        return base64.b64encode(text.encode("utf-8")).decode("ascii")
