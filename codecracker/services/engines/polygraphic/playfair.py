from typing import ClassVar

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

Grid = list[list[str]]


class PlayfairSolver(Solver):
    """
    Playfair cipher solver.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Decryption applies the same rules in reverse and needs the keyword;
    unkeyed Playfair is not attacked.
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )
    can_encrypt = True

    ALPHABET: ClassVar[str] = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, I=J
    FILLER: ClassVar[str] = "X"

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        keyword = key_as_text(options.key if options else None)
        if not keyword:
            return []

        grid = self.build_grid(keyword)
        letters = self._normalize(ciphertext)
        pairs = [(letters[i], letters[i + 1]) for i in range(0, len(letters) - 1, 2)]
        plaintext = self._transform(pairs, grid, -1).lower()
        if not plaintext:
            return []

        return [make_result(
            self.cipher_type, plaintext, self.quality(plaintext), keyword, {"method": "playfair"},
        )]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        keyword = key_as_text(options.key if options else None)
        if not keyword:
            raise InvalidKeyError(self.cipher_type.value, "a keyword for encryption")

        grid = self.build_grid(keyword)
        ciphertext = self._transform(self._prepare_digraphs(plaintext), grid, 1)
        return make_encrypt_result(self.cipher_type, ciphertext, keyword, {"method": "playfair"})

    def build_grid(self, keyword: str) -> Grid:
        """Build the 5x5 key square: keyword letters first, then the rest of the alphabet."""
        seen: dict[str, None] = dict.fromkeys(self._normalize(keyword))
        for char in self.ALPHABET:
            seen.setdefault(char)
        letters = list(seen)
        return [letters[row * 5:row * 5 + 5] for row in range(5)]

    def _normalize(self, text: str) -> str:
        """Uppercase, J merged into I, letters only."""
        text = text.upper().replace("J", "I")
        return "".join(c for c in text if c in self.ALPHABET)

    def _prepare_digraphs(self, text: str) -> list[tuple[str, str]]:
        """Split into digraphs, separating doubled letters and padding odd length with X."""
        letters = self._normalize(text)
        pairs = []
        i = 0
        while i < len(letters):
            first = letters[i]
            second = letters[i + 1] if i + 1 < len(letters) else None
            if second is None or second == first:
                pairs.append((first, self.FILLER))
                i += 1
            else:
                pairs.append((first, second))
                i += 2
        return pairs

    def _transform(self, pairs: list[tuple[str, str]], grid: Grid, step: int) -> str:
        """Apply the digraph rules; ``step`` is +1 to encrypt and -1 to decrypt."""
        positions = {
            grid[row][col]: (row, col) for row in range(5) for col in range(5)
        }

        result = []
        for a, b in pairs:
            row_a, col_a = positions[a]
            row_b, col_b = positions[b]

            if row_a == row_b:
                result.append(grid[row_a][(col_a + step) % 5])
                result.append(grid[row_b][(col_b + step) % 5])
            elif col_a == col_b:
                result.append(grid[(row_a + step) % 5][col_a])
                result.append(grid[(row_b + step) % 5][col_b])
            else:
                result.append(grid[row_a][col_b])
                result.append(grid[row_b][col_a])

        return "".join(result)
