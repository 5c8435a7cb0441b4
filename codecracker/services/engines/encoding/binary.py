import re

from codecracker.models.schemas import CipherType
from codecracker.services.engines.encoding.common import EncodingSolver, bytes_to_text

_BINARY = re.compile(r"^[01\s]+$")
_WHITESPACE = re.compile(r"\s+")


class BinarySolver(EncodingSolver):
    """Bytes written as 8-bit groups of 0 and 1."""

    name = "Binary"
    cipher_type = CipherType.BINARY
    description = "Each byte written as eight binary digits, groups separated by spaces."

    def decode(self, text: str) -> str | None:
        if not text or not _BINARY.match(text):
            return None
        bits = _WHITESPACE.sub("", text)
        if not bits or len(bits) % 8 != 0:
            return None
        data = bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))
        return bytes_to_text(data)

    def encode(self, text: str) -> str:
        return " ".join(format(byte, "08b") for byte in text.encode("utf-8"))
