"""Tests for the text encoding solvers."""

import pytest

from codecracker.models.schemas import CipherFamily, CipherType
from codecracker.services.engines.encoding import (
    Base32Solver,
    Base64Solver,
    BinarySolver,
    HexSolver,
    MorseSolver,
    UrlEncodingSolver,
)
from codecracker.services.engines.encoding.base32 import canonical_padding

SAMPLES = [
    "Hello World",
    "The quick brown fox jumps over the lazy dog.",
    "Symbols: 100% & more? <yes> {no} [maybe]",
    "a",
]


class TestEncodingRoundtrips:
    """Encoding then solving gives the original text back."""

    @pytest.mark.parametrize("solver_class", [
        Base64Solver,
        Base32Solver,
        HexSolver,
        BinarySolver,
    ])
    @pytest.mark.parametrize("text", SAMPLES)
    def test_roundtrip(self, solver_class, text):
        solver = solver_class()
        encoded = solver.encrypt(text).ciphertext
        results = solver.solve(encoded)
        assert len(results) == 1
        assert results[0].plaintext == text
        assert results[0].confidence == 1.0
        assert results[0].details["encoding"] == solver.cipher_type.value

    @pytest.mark.parametrize("text", [
        "Hello World",
        "a=1&b=2 c",
        "Symbols: 100% & more?",
    ])
    def test_url_roundtrip(self, text):
        solver = UrlEncodingSolver()
        encoded = solver.encrypt(text).ciphertext
        assert solver.solve(encoded)[0].plaintext == text

    @pytest.mark.parametrize("text", ["SOS", "HELLO WORLD", "CALL 911 NOW"])
    def test_morse_roundtrip(self, text):
        solver = MorseSolver()
        encoded = solver.encrypt(text).ciphertext
        assert solver.solve(encoded)[0].plaintext == text

    def test_encoding_family(self):
        for solver_class in (Base64Solver, Base32Solver, HexSolver, BinarySolver):
            assert solver_class.cipher_family == CipherFamily.ENCODING
            assert solver_class.can_encrypt


class TestBase64Solver:

    @pytest.fixture
    def solver(self):
        return Base64Solver()

    def test_known(self, solver):
        result = solver.solve("SGVsbG8gV29ybGQ=")[0]
        assert result.plaintext == "Hello World"
        assert result.cipher_type == CipherType.BASE64
        assert result.key is None

    def test_surrounding_whitespace(self, solver):
        assert solver.solve("  SGVsbG8gV29ybGQ=\n")[0].plaintext == "Hello World"

    @pytest.mark.parametrize("text", ["abc", "SGVsbG8@", "!!!!"])
    def test_invalid_shape(self, solver, text):
        assert solver.solve(text) == []

    def test_unprintable_rejected(self, solver):
        assert solver.solve("AAECAwQFBgc=") == []


class TestBase32Solver:

    def test_known(self):
        solver = Base32Solver()
        assert solver.encrypt("Hello World").ciphertext == "JBSWY3DPEBLW64TMMQ======"
        assert solver.solve("JBSWY3DPEBLW64TMMQ======")[0].plaintext == "Hello World"

    def test_lowercase_accepted(self):
        assert Base32Solver().solve("jbswy3dp")[0].plaintext == "Hello"

    def test_invalid_length(self):
        assert Base32Solver().solve("JBSWY3D") == []

    def test_non_canonical_padding(self):
        assert Base32Solver().solve("MZXW6Y==")[0].plaintext == "foo"

    def test_canonical_padding(self):
        assert canonical_padding("MZXW6Y==") == "MZXW6==="
        assert canonical_padding("JBSWY3DPEBLW64TMMQ======") == "JBSWY3DPEBLW64TMMQ======"
        assert canonical_padding("A=======") == ""


class TestHexSolver:

    def test_known(self):
        assert HexSolver().solve("48656c6c6f")[0].plaintext == "Hello"
        assert HexSolver().encrypt("Hi").ciphertext == "4869"

    def test_spaced_hex(self):
        assert HexSolver().solve("48 65 6c 6c 6f")[0].plaintext == "Hello"

    @pytest.mark.parametrize("text", ["abc", "zz", "00010203"])
    def test_rejected(self, text):
        assert HexSolver().solve(text) == []


class TestBinarySolver:

    def test_known(self):
        solver = BinarySolver()
        assert solver.encrypt("Hi").ciphertext == "01001000 01101001"
        assert solver.solve("01001000 01101001")[0].plaintext == "Hi"

    def test_unspaced(self):
        assert BinarySolver().solve("0100100001101001")[0].plaintext == "Hi"

    def test_partial_byte(self):
        assert BinarySolver().solve("0100100") == []


class TestUrlEncodingSolver:

    def test_known(self):
        assert UrlEncodingSolver().solve("Hello%20World")[0].plaintext == "Hello World"

    def test_encode_component(self):
        assert UrlEncodingSolver().encrypt("a b&c").ciphertext == "a%20b%26c"

    def test_no_escapes(self):
        assert UrlEncodingSolver().solve("hello") == []

    def test_invalid_utf8(self):
        assert UrlEncodingSolver().solve("%ff%fe") == []

    @pytest.mark.parametrize("text", ["%ZZ%41", "100%%20", "abc%41%"])
    def test_malformed_escape(self, text):
        assert UrlEncodingSolver().solve(text) == []


class TestMorseSolver:

    def test_known(self):
        assert MorseSolver().solve("... --- ...")[0].plaintext == "SOS"

    def test_words(self):
        assert MorseSolver().solve(".... .. / - .... . .-. .")[0].plaintext == "HI THERE"

    def test_encode(self):
        assert MorseSolver().encrypt("sos").ciphertext == "... --- ..."

    def test_unknown_symbol(self):
        assert MorseSolver().solve("... ...... ...") == []
