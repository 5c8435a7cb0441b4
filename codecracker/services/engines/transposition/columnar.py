from itertools import permutations
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


def keyword_to_permutation(keyword: str) -> list[int]:
    """
    Column read order for a keyword.

    Columns are read in alphabetical order of their key letter; repeated
    letters keep their left-to-right order.
    """
    keyword = keyword.lower()
    return sorted(range(len(keyword)), key=lambda i: keyword[i])


def columnar_encrypt(plaintext: str, permutation: list[int]) -> str:
    """Write plaintext row by row, read columns in permutation order. No padding."""
    num_cols = len(permutation)
    return "".join(plaintext[col::num_cols] for col in permutation)


def columnar_decrypt(ciphertext: str, permutation: list[int]) -> str:
    """
    Invert columnar_encrypt.

    With ``len % num_cols`` leftover characters, the leftmost columns of the
    grid are one character longer; the i-th chunk of ciphertext belongs to
    grid column ``permutation[i]``.
    """
    num_cols = len(permutation)
    num_full_rows, extra = divmod(len(ciphertext), num_cols)

    columns = [""] * num_cols
    offset = 0
    for col in permutation:
        length = num_full_rows + (1 if col < extra else 0)
        columns[col] = ciphertext[offset:offset + length]
        offset += length

    num_rows = num_full_rows + (1 if extra else 0)
    return "".join(
        column[row]
        for row in range(num_rows)
        for column in columns
        if row < len(column)
    )


class ColumnarSolver(Solver):
    """
    Columnar Transposition cipher solver.

    The plaintext is written into a grid row by row, then the columns
    are read out in an order determined by a keyword.

    Example with keyword "ZEBRAS" (sorted: A, B, E, R, S, Z):

    Key:    Z E B R A S
            ─────────────
            W E A R E D
            I S C O V E
            R E D F L E
            E A T O N C
            E

    Read columns in sorted order: EVLN ACDT ESEA ROFO DEEC WIREE

    Without a key every permutation is tried for up to 7 columns; longer keys
    up to 10 columns only get the identity and reversed orders.
    """

    name = "Columnar Transposition Cipher"
    cipher_type = CipherType.COLUMNAR_TRANSPOSITION
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where plaintext is written into a grid "
        "by rows, then read out by columns in an order determined by "
        "a keyword. The keyword's alphabetical order determines column sequence."
    )
    can_encrypt = True

    MIN_KEY_LENGTH: ClassVar[int] = 2
    MAX_KEY_LENGTH: ClassVar[int] = 10
    MAX_EXHAUSTIVE_KEY_LENGTH: ClassVar[int] = 7

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        keyword = key_as_text(options.key if options else None)
        if keyword:
            permutation = keyword_to_permutation(keyword)
            plaintext = columnar_decrypt(ciphertext, permutation)
            return [make_result(
                self.cipher_type, plaintext, self.quality(plaintext), keyword,
                {"key_length": len(permutation), "permutation": permutation},
            )]

        candidates = []
        for key_length in range(self.MIN_KEY_LENGTH, self.MAX_KEY_LENGTH + 1):
            for permutation in self._permutations(key_length):
                plaintext = columnar_decrypt(ciphertext, permutation)
                candidates.append((self.quality(plaintext), permutation, plaintext))

        candidates.sort(key=lambda c: c[0], reverse=True)

        return [
            make_result(
                self.cipher_type, plaintext, score, len(permutation),
                {"key_length": len(permutation), "permutation": permutation},
            )
            for score, permutation, plaintext in candidates[:self.max_results(options)]
        ]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        keyword = key_as_text(options.key if options else None)
        if not keyword:
            raise InvalidKeyError(self.cipher_type.value, "a keyword for encryption")

        permutation = keyword_to_permutation(keyword)
        return make_encrypt_result(
            self.cipher_type,
            columnar_encrypt(plaintext, permutation),
            keyword,
            {"key_length": len(permutation), "permutation": permutation},
        )

    def _permutations(self, key_length: int) -> list[list[int]]:
        identity = list(range(key_length))
        if key_length > self.MAX_EXHAUSTIVE_KEY_LENGTH:
            return [identity, identity[::-1]]
        return [list(p) for p in permutations(identity)]
