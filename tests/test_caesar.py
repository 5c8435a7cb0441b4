"""Tests for Caesar cipher solver."""

import pytest

from codecracker.core.exceptions import InvalidKeyError
from codecracker.models.schemas import CipherType, SolverOptions
from codecracker.services.engines.monoalphabetic.caesar import CaesarSolver


class TestCaesarSolver:
    """Test suite for Caesar cipher solver."""

    @pytest.fixture
    def solver(self):
        return CaesarSolver()

    @pytest.fixture
    def sample_plaintext(self):
        return "Hello, World!"

    @pytest.fixture
    def long_plaintext(self):
        """Longer text with natural English letter distribution."""
        return (
            "CRYPTOGRAPHY IS THE STUDY OF SECURE COMMUNICATION IN THE PRESENCE "
            "OF ADVERSARIES. LONG BEFORE COMPUTERS EXISTED PEOPLE INVENTED CIPHERS "
            "TO HIDE MEANING FROM UNAUTHORIZED READERS. SOME METHODS RELIED ON SIMPLE "
            "SUBSTITUTION WHILE OTHERS USED TRANSPOSITION OR PERIODIC KEYS."
        )

    def test_encrypt_decrypt_roundtrip(self, solver, sample_plaintext):
        """Every shift is recovered by the brute force."""
        for shift in range(1, 26):
            ciphertext = solver.encrypt(sample_plaintext, SolverOptions(key=str(shift))).ciphertext
            results = solver.solve(ciphertext, SolverOptions(max_results=25))
            assert any(
                r.plaintext == sample_plaintext and r.key == shift for r in results
            ), f"shift {shift} not recovered"

    def test_encrypt_shift_7(self, solver):
        result = solver.encrypt("HELLO", SolverOptions(key="7"))
        assert result.ciphertext == "OLSSV"
        assert result.key == 7
        assert result.cipher_type == CipherType.CAESAR

    def test_encrypt_default_shift(self, solver):
        assert solver.encrypt("Hello World").ciphertext == "Khoor Zruog"

    def test_encrypt_invalid_key(self, solver):
        with pytest.raises(InvalidKeyError):
            solver.encrypt("HELLO", SolverOptions(key="seven"))

    def test_preserves_case_and_punctuation(self, solver):
        ciphertext = solver.encrypt("Hi, there! 42", SolverOptions(key="1")).ciphertext
        assert ciphertext == "Ij, uifsf! 42"

    def test_solve_returns_ranked_candidates(self, solver):
        results = solver.solve("Khoor Zruog")
        assert len(results) == CaesarSolver.DEFAULT_MAX_RESULTS
        confidences = [r.confidence for r in results]
        assert confidences == sorted(confidences, reverse=True)
        assert all(r.details["shift"] == r.key for r in results)

    def test_find_key_and_decrypt(self, solver, long_plaintext):
        """Test automatic key finding."""
        ciphertext = solver.encrypt(long_plaintext, SolverOptions(key="13")).ciphertext

        best = solver.solve(ciphertext)[0]

        assert best.key == 13
        assert best.plaintext == long_plaintext
