from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackResult,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.engines.base import Solver, make_encrypt_result, make_result


class AtbashSolver(Solver):
    """
    Atbash cipher solver.

    Atbash maps each letter to its mirror in the alphabet (A<->Z, B<->Y, ...).
    The mapping is its own inverse and has no key.
    """

    name = "Atbash Cipher"
    cipher_type = CipherType.ATBASH
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher that reverses the alphabet. "
        "Originally used with the Hebrew alphabet."
    )
    can_encrypt = True

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        plaintext = self.transform(ciphertext)
        return [make_result(
            self.cipher_type, plaintext, self.quality(plaintext), details={"method": "atbash"},
        )]

    def encrypt(
        self,
        plaintext: str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        return make_encrypt_result(
            self.cipher_type, self.transform(plaintext), details={"method": "atbash"},
        )

    def transform(self, text: str) -> str:
        """Mirror every ASCII letter, preserving case."""
        result = []
        for char in text:
            if "A" <= char <= "Z":
                result.append(chr(90 - (ord(char) - 65)))
            elif "a" <= char <= "z":
                result.append(chr(122 - (ord(char) - 97)))
            else:
                result.append(char)
        return "".join(result)
