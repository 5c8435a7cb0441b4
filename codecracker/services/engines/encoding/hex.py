import re

from codecracker.models.schemas import CipherType
from codecracker.services.engines.encoding.common import EncodingSolver, bytes_to_text

_HEX = re.compile(r"^[0-9a-fA-F]+$")
_WHITESPACE = re.compile(r"\s+")


class HexSolver(EncodingSolver):
    """Hexadecimal byte encoding; whitespace between digits is ignored."""

    name = "Hexadecimal"
    cipher_type = CipherType.HEX
    description = "Each byte written as two hexadecimal digits."

    def decode(self, text: str) -> str | None:
        text = _WHITESPACE.sub("", text)
        if not text or len(text) % 2 != 0 or not _HEX.match(text):
            return None
        return bytes_to_text(bytes.fromhex(text))

    def encode(self, text: str) -> str:
        return text.encode("utf-8").hex()
