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


def zigzag(length: int, rails: int) -> list[int]:
    """Rail index of every position when writing ``length`` characters in a zig-zag."""
    assignment = []
    rail = 0
    direction = 1  # 1 = down, -1 = up
    for _ in range(length):
        assignment.append(rail)
        # Change direction at top or bottom
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1
        rail += direction
    return assignment


class RailFenceSolver(Solver):
    """
    Rail Fence cipher solver.

    The plaintext is written in a zig-zag pattern across multiple "rails",
    then read off row by row.

    Example with 3 rails:
    W . . . E . . . C . . . R . . . L . . . T . . . E
    . E . R . D . S . O . E . E . F . E . A . O . C .
    . . A . . . I . . . V . . . D . . . E . . . N . .

    Ciphertext: WECRLTEERDSOEEFEAOCAIVDEN

    Without a key every rail count from 2 to 10 is tried.
    """

    name = "Rail Fence Cipher"
    cipher_type = CipherType.RAIL_FENCE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where plaintext is written in a zig-zag "
        "pattern across multiple rails, then read off row by row."
    )
    can_encrypt = True

    DEFAULT_RAILS: ClassVar[int] = 3
    MIN_RAILS: ClassVar[int] = 2
    MAX_RAILS: ClassVar[int] = 10

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        if options is not None and options.key:
            rails = self._parse_key(options.key)
            if rails is None or rails < self.MIN_RAILS:
                return []
            plaintext = self._decrypt(ciphertext, rails)
            return [make_result(
                self.cipher_type, plaintext, self.quality(plaintext), rails, {"rails": rails},
            )]

        candidates = []
        for rails in range(self.MIN_RAILS, self.MAX_RAILS + 1):
            if rails >= len(ciphertext):
                break
            plaintext = self._decrypt(ciphertext, rails)
            candidates.append((self.quality(plaintext), rails, plaintext))

        candidates.sort(key=lambda c: c[0], reverse=True)

        return [
            make_result(self.cipher_type, plaintext, score, rails, {"rails": rails})
            for score, rails, plaintext in candidates[:self.max_results(options)]
        ]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        rails = self.DEFAULT_RAILS
        if options is not None and options.key:
            rails = self._parse_key(options.key)
        if rails is None or rails < self.MIN_RAILS:
            raise InvalidKeyError(self.cipher_type.value, "a numeric key >= 2 for encryption")

        fence: list[list[str]] = [[] for _ in range(rails)]
        for char, rail in zip(plaintext, zigzag(len(plaintext), rails)):
            fence[rail].append(char)

        ciphertext = "".join("".join(row) for row in fence)
        return make_encrypt_result(self.cipher_type, ciphertext, rails, {"rails": rails})

    def _parse_key(self, key: str | bytes) -> int | None:
        """Parse key to number of rails."""
        try:
            return int(key_as_text(key).strip())
        except ValueError:
            return None

    def _decrypt(self, ciphertext: str, rails: int) -> str:
        """Split the ciphertext into rails, then read them back in zig-zag order."""
        n = len(ciphertext)
        if rails <= 1 or rails >= n:
            return ciphertext

        assignment = zigzag(n, rails)
        rail_lengths = [assignment.count(rail) for rail in range(rails)]

        fence = []
        offset = 0
        for length in rail_lengths:
            fence.append(iter(ciphertext[offset:offset + length]))
            offset += length

        return "".join(next(fence[rail]) for rail in assignment)
