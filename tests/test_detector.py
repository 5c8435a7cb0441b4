"""Tests for heuristic cipher detection."""

import hashlib

import pytest

from codecracker.models.schemas import CipherType, SolverOptions
from codecracker.services.detection.cipher_detector import CipherDetector
from codecracker.services.engines.base import shift_text
from codecracker.services.engines.polyalphabetic.vigenere import VigenereSolver

PASSAGE = (
    "cryptography is the study of secure communication in the presence of adversaries "
    "long before computers existed people invented ciphers to hide the meaning of their "
    "messages from unauthorized readers some methods relied on simple substitution while "
    "others used transposition or periodic keys the security of these systems depended on "
    "keeping the method and the key secret from the enemy during the war analysts learned "
    "to break many of these ciphers by counting how often each letter appeared in the "
    "intercepted messages and comparing those counts with the known frequencies of the language"
)


class TestCipherDetector:
    """Test the two-phase cipher detector."""

    @pytest.fixture
    def detector(self):
        return CipherDetector()

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_input(self, detector, text):
        assert detector.detect(text) == []

    @pytest.mark.parametrize("text", [
        "Uryyb Jbeyq",
        "SGVsbG8gV29ybGQ=",
        "... --- ...",
        "48656c6c6f",
        PASSAGE,
        "!!!???",
    ])
    def test_sorted_and_bounded(self, detector, text):
        candidates = detector.detect(text)
        confidences = [c.confidence for c in candidates]
        assert confidences == sorted(confidences, reverse=True)
        assert all(0.0 <= c <= 1.0 for c in confidences)
        assert len({c.cipher_type for c in candidates}) == len(candidates)

    def test_alphabetic_text(self, detector):
        candidates = detector.detect("Uryyb Jbeyq")
        assert candidates[0].cipher_type == CipherType.ROT13
        types = [c.cipher_type for c in candidates]
        assert CipherType.CAESAR in types
        assert CipherType.ATBASH in types
        assert CipherType.BASE64 not in types

    def test_morse(self, detector):
        assert detector.detect("... --- ...")[0].cipher_type == CipherType.MORSE

    def test_binary(self, detector):
        assert detector.detect("01001000 01101001")[0].cipher_type == CipherType.BINARY

    def test_url_encoding(self, detector):
        assert detector.detect("Hello%20World")[0].cipher_type == CipherType.URL_ENCODING

    def test_base64_with_padding(self, detector):
        top = detector.detect("SGVsbG8gV29ybGQ=")[0]
        assert top.cipher_type == CipherType.BASE64
        assert top.confidence == pytest.approx(0.75)
        assert top.details["has_padding"] is True

    def test_hex(self, detector):
        top = detector.detect("48656c6c6f")[0]
        assert top.cipher_type == CipherType.HEX

    def test_md5_hash(self, detector):
        digest = hashlib.md5(b"password").hexdigest()
        top = detector.detect(digest)[0]
        assert top.cipher_type == CipherType.HASH_LOOKUP
        assert top.details["hash_type"] == "MD5"

    def test_monoalphabetic_statistics(self, detector):
        candidates = detector.detect(shift_text(PASSAGE, 3))
        assert candidates[0].cipher_type == CipherType.CAESAR
        assert candidates[0].confidence == pytest.approx(0.4)
        assert candidates[0].details["classification"] == "monoalphabetic"

    def test_polyalphabetic_statistics(self, detector):
        ciphertext = VigenereSolver().encrypt(PASSAGE, SolverOptions(key="blackhorse")).ciphertext
        top = detector.detect(ciphertext)[0]
        assert top.cipher_type == CipherType.VIGENERE
        assert top.details["classification"] == "polyalphabetic"
        assert top.details["likely_key_lengths"]

    def test_short_text_skips_statistics(self, detector):
        candidates = detector.detect("Khoor")
        assert all("classification" not in c.details for c in candidates)
