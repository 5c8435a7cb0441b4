"""Character-set profiling and structural shape tests used for detection."""

import re
from dataclasses import dataclass

_HEX = re.compile(r"^[0-9a-fA-F]+$")
_BASE64 = re.compile(r"^[A-Za-z0-9+/]+={0,2}$")
_BASE32 = re.compile(r"^[A-Z2-7]+=*$", re.IGNORECASE)
_BINARY = re.compile(r"^[01][\s01]+$")
_MORSE = re.compile(r"^[.\-/ ]+$")
_URL_ESCAPE = re.compile(r"%[0-9A-Fa-f]{2}")


@dataclass
class CharsetProfile:
    """Character class counts of a text."""

    total_chars: int
    alpha_count: int
    digit_count: int
    upper_count: int
    lower_count: int
    space_count: int
    punct_count: int
    non_ascii_count: int
    unique_chars: int

    @property
    def alpha_ratio(self) -> float:
        return self.alpha_count / self.total_chars if self.total_chars else 0.0

    @property
    def digit_ratio(self) -> float:
        return self.digit_count / self.total_chars if self.total_chars else 0.0

    @property
    def upper_ratio(self) -> float:
        return self.upper_count / self.total_chars if self.total_chars else 0.0

    @property
    def lower_ratio(self) -> float:
        return self.lower_count / self.total_chars if self.total_chars else 0.0


def analyze_charset(text: str) -> CharsetProfile:
    """Count the character classes of ``text``."""
    alpha = digit = upper = lower = space = punct = non_ascii = 0

    for char in text:
        if ord(char) > 127:
            non_ascii += 1
        elif "A" <= char <= "Z":
            alpha += 1
            upper += 1
        elif "a" <= char <= "z":
            alpha += 1
            lower += 1
        elif "0" <= char <= "9":
            digit += 1
        elif char == " ":
            space += 1
        else:
            punct += 1

    return CharsetProfile(
        total_chars=len(text),
        alpha_count=alpha,
        digit_count=digit,
        upper_count=upper,
        lower_count=lower,
        space_count=space,
        punct_count=punct,
        non_ascii_count=non_ascii,
        unique_chars=len(set(text)),
    )


def is_hex_string(text: str) -> bool:
    trimmed = text.strip()
    return bool(_HEX.match(trimmed)) and len(trimmed) % 2 == 0


def is_base64_string(text: str) -> bool:
    trimmed = text.strip()
    if len(trimmed) < 4:
        return False
    return bool(_BASE64.match(trimmed)) and len(trimmed) % 4 == 0


def is_base32_string(text: str) -> bool:
    trimmed = text.strip()
    if len(trimmed) < 8:
        return False
    return bool(_BASE32.match(trimmed)) and len(trimmed) % 8 == 0


def is_binary_string(text: str) -> bool:
    return bool(_BINARY.match(text.strip()))


def is_morse_string(text: str) -> bool:
    return bool(_MORSE.match(text.strip())) and ("." in text or "-" in text)


def has_url_encoding(text: str) -> bool:
    return bool(_URL_ESCAPE.search(text))
