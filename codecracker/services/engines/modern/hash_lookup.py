import hashlib
import re
from functools import lru_cache
from typing import ClassVar

from codecracker.models.schemas import (
    CipherFamily,
    CipherType,
    CrackResult,
    SolverOptions,
)
from codecracker.services.engines.base import Solver, make_result

COMMON_PASSWORDS = (
    "password", "123456", "12345678", "1234", "qwerty", "12345", "dragon",
    "baseball", "football", "letmein", "monkey", "abc123", "mustang",
    "michael", "shadow", "master", "jennifer", "111111", "2000", "jordan",
    "superman", "harley", "1234567", "hunter", "trustno1", "ranger",
    "buster", "thomas", "tigger", "robert", "soccer", "batman", "test",
    "pass", "killer", "hockey", "george", "charlie", "andrew", "michelle",
    "love", "sunshine", "jessica", "6969", "pepper", "daniel", "access",
    "123456789", "654321", "joshua", "maggie", "starwars", "silver",
    "william", "dallas", "yankees", "123123", "ashley", "666666", "hello",
    "amanda", "orange", "biteme", "freedom", "computer", "thunder",
    "nicole", "ginger", "heather", "hammer", "summer", "corvette",
    "taylor", "austin", "1111", "merlin", "matthew", "121212", "golfer",
    "cheese", "princess", "martin", "chelsea", "patrick", "richard",
    "diamond", "yellow", "bigdog", "secret", "asdfgh", "sparky", "cowboy",
    "camaro", "matrix", "falcon", "iloveyou", "guitar", "purple",
    "scooter", "phoenix", "aaaaaa", "tigers", "cougar", "chicken",
    "beaver", "eagle", "mercedes", "sam", "winner", "admin", "root",
    "administrator", "guest", "welcome", "login", "changeme", "passw0rd",
    "p@ssword", "p@ssw0rd", "default", "qwerty123", "letmein1",
    "password1", "password123", "1q2w3e", "1q2w3e4r", "qazwsx", "zxcvbn",
    "zxcvbnm", "asdfghjkl", "qwerty1", "abc", "abcdef", "abcd1234",
    "iloveu", "monkey1", "dragon1", "master1", "apple", "banana",
    "coffee", "cookie", "internet", "whatever", "nothing", "something",
    "people", "friend", "angel", "angel1", "baby", "pretty", "lovely",
    "soccer1", "hockey1", "football1", "baseball1", "trustno", "maria",
    "thomas1", "qwe123", "159753", "147258", "321654", "letmein2",
    "charlie1", "midnight", "flower", "jasmine", "butterfly", "shadow1",
    "killer1", "buster1", "happy", "happy1", "friday", "monday", "junior",
    "senior", "yankee", "dragon12", "mike", "james", "david", "kevin",
    "steven", "pepper1", "power", "family", "music", "ninja", "pirate",
    "zombie", "princess1", "diamond1", "gold", "platinum", "blahblah",
    "password2", "hello1", "world", "helloworld",
)

# Hex digest length -> hashlib algorithm
HASH_ALGORITHMS = {32: "md5", 40: "sha1", 64: "sha256"}

_LOWER_HEX = re.compile(r"^[0-9a-f]+$")


@lru_cache(maxsize=None)
def digest_table(algorithm: str) -> dict[str, str]:
    """Hex digest -> password for every common password."""
    return {
        hashlib.new(algorithm, password.encode("utf-8")).hexdigest(): password
        for password in COMMON_PASSWORDS
    }


class HashLookupSolver(Solver):
    """
    Reverse common password hashes.

    The algorithm is inferred from the digest length and the digest is looked
    up among the hashes of a fixed list of common passwords. Only exact matches
    are reported.
    """

    name = "Hash Lookup"
    cipher_type = CipherType.HASH_LOOKUP
    cipher_family = CipherFamily.MODERN
    description = "Dictionary lookup of MD5, SHA-1 and SHA-256 digests of common passwords."

    CONFIDENCE: ClassVar[float] = 0.99

    def solve(
        self,
        ciphertext: str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        digest = ciphertext.strip().lower()
        if not _LOWER_HEX.match(digest):
            return []

        algorithm = HASH_ALGORITHMS.get(len(digest))
        if algorithm is None:
            return []

        password = digest_table(algorithm).get(digest)
        if password is None:
            return []

        return [make_result(
            self.cipher_type, password, self.CONFIDENCE,
            details={"hash_type": algorithm.upper(), "method": "dictionary-lookup"},
        )]
