import re
from typing import ClassVar
from urllib.parse import quote, unquote

from codecracker.models.schemas import CipherType
from codecracker.services.engines.encoding.common import EncodingSolver

_ESCAPE = re.compile(r"%[0-9a-fA-F]{2}")
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")


class UrlEncodingSolver(EncodingSolver):
    """Percent-encoding of UTF-8 bytes, as used in URL components."""

    name = "URL Encoding"
    cipher_type = CipherType.URL_ENCODING
    description = "Reserved and non-ASCII characters written as %XX escapes of their UTF-8 bytes."

    # Characters left unescaped when encoding a URI component
    SAFE: ClassVar[str] = "-_.!~*'()"

    def decode(self, text: str) -> str | None:
        if not text or not _ESCAPE.search(text):
            return None
        # Every % must start a complete escape
        if _MALFORMED_ESCAPE.search(text):
            return None
        try:
            decoded = unquote(text, errors="strict")
        except UnicodeDecodeError:
            return None
        # Nothing was actually decoded
        if decoded == text:
            return None
        return decoded

    def encode(self, text: str) -> str:
        return quote(text, safe=self.SAFE)
