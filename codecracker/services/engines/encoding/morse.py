import re

from codecracker.models.schemas import CipherType
from codecracker.services.engines.encoding.common import EncodingSolver

MORSE_CODE = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "'": ".----.", "!": "-.-.--",
    "/": "-..-.", "(": "-.--.", ")": "-.--.-", "&": ".-...", ":": "---...",
    ";": "-.-.-.", "=": "-...-", "+": ".-.-.", "-": "-....-", "_": "..--.-",
    '"': ".-..-.", "$": "...-..-", "@": ".--.-.",
}
MORSE_TO_CHAR = {code: char for char, code in MORSE_CODE.items()}

_MORSE = re.compile(r"^[.\-\s/]+$")
WORD_SEPARATOR = " / "


class MorseSolver(EncodingSolver):
    """
    International Morse code.

    Letters are separated by spaces and words by `` / ``. Decoding fails as
    a whole on any unknown symbol; encoding drops characters Morse cannot
    represent.
    """

    name = "Morse Code"
    cipher_type = CipherType.MORSE
    description = "Letters and digits as sequences of dots and dashes."

    def decode(self, text: str) -> str | None:
        if not text or not _MORSE.match(text):
            return None

        words = []
        for word in text.split(WORD_SEPARATOR):
            letters = []
            for symbol in word.split():
                char = MORSE_TO_CHAR.get(symbol)
                if char is None:
                    return None
                letters.append(char)
            words.append("".join(letters))
        return " ".join(words)

    def encode(self, text: str) -> str:
        words = []
        for word in text.upper().split(" "):
            codes = [MORSE_CODE[c] for c in word if c in MORSE_CODE]
            if codes:
                words.append(" ".join(codes))
        return WORD_SEPARATOR.join(words)
