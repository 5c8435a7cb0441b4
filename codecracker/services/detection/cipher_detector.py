import re
from dataclasses import dataclass
from typing import Any, ClassVar

from codecracker.models.schemas import CipherType, DetectionCandidate, IoCClassification
from codecracker.services.analysis.charset import (
    has_url_encoding,
    is_base32_string,
    is_base64_string,
    is_binary_string,
    is_hex_string,
    is_morse_string,
)
from codecracker.services.analysis.statistics import (
    StatisticalAnalyzer,
    distances_gcd,
    repeated_trigram_distances,
)

_ALPHA_TEXT = re.compile(r"^[a-zA-Z\s]+$")
_ALPHA_PUNCT_TEXT = re.compile(r"^[a-zA-Z\s.,!?]+$")


@dataclass
class DetectionThresholds:
    """Thresholds for cipher detection."""

    # Statistical phase gate
    min_alpha_ratio: float = 0.7
    min_statistical_length: int = 20

    # Above this entropy (bits/char) the text may be XOR output
    xor_entropy: float = 5.0

    # Minimum lengths for structural matches
    min_morse_length: int = 3
    min_binary_length: int = 8
    min_classical_length: int = 5
    min_transposition_length: int = 10


class CipherDetector:
    """
    Two-phase heuristic cipher detection.

    Phase 1 matches the structural shape of the text (alphabets, lengths,
    padding) with fixed confidences. Phase 2 runs only on mostly alphabetic
    text and uses the index of coincidence, Kasiski examination and entropy
    to separate monoalphabetic from polyalphabetic ciphers. Candidates from
    both phases are merged per cipher type keeping the highest confidence.
    """

    THRESHOLDS: ClassVar[DetectionThresholds] = DetectionThresholds()

    HASH_LENGTHS: ClassVar[dict[int, str]] = {
        32: "MD5",
        40: "SHA1",
        64: "SHA256",
        128: "SHA512",
    }

    def __init__(self, analyzer: StatisticalAnalyzer | None = None):
        self.analyzer = analyzer or StatisticalAnalyzer()

    def detect(self, text: str) -> list[DetectionCandidate]:
        """
        Detect likely cipher types.

        Args:
            text: The raw ciphertext

        Returns:
            Candidates sorted by confidence, empty for blank input
        """
        if not text or not text.strip():
            return []

        trimmed = text.strip()
        candidates = self._detect_by_pattern(trimmed) + self._detect_by_statistics(trimmed)

        merged: dict[CipherType, DetectionCandidate] = {}
        for candidate in candidates:
            existing = merged.get(candidate.cipher_type)
            if existing is None or candidate.confidence > existing.confidence:
                merged[candidate.cipher_type] = candidate

        return sorted(merged.values(), key=lambda c: c.confidence, reverse=True)

    def _detect_by_pattern(self, text: str) -> list[DetectionCandidate]:
        """Phase 1: structural shape tests."""
        t = self.THRESHOLDS
        length = len(text)
        candidates: list[DetectionCandidate] = []

        if is_morse_string(text) and length >= t.min_morse_length:
            candidates.append(_candidate(
                CipherType.MORSE, 0.9, reason="Contains only morse code characters",
            ))

        if is_binary_string(text) and length >= t.min_binary_length:
            candidates.append(_candidate(
                CipherType.BINARY, 0.85, reason="Contains only binary digits and spaces",
            ))

        if has_url_encoding(text):
            candidates.append(_candidate(
                CipherType.URL_ENCODING, 0.85, reason="Contains URL-encoded sequences",
            ))

        if is_hex_string(text):
            hash_type = self.HASH_LENGTHS.get(length)
            if hash_type:
                candidates.append(_candidate(
                    CipherType.HASH_LOOKUP,
                    0.8,
                    hash_type=hash_type,
                    reason=f"{length}-char hex string matches {hash_type} hash length",
                ))
            elif length >= 2:
                candidates.append(_candidate(CipherType.HEX, 0.7, reason="Valid hex string"))

        if is_base32_string(text):
            candidates.append(_candidate(CipherType.BASE32, 0.7, reason="Valid base32 pattern"))

        if is_base64_string(text):
            has_padding = text.endswith("=")
            candidates.append(_candidate(
                CipherType.BASE64,
                0.75 if has_padding else 0.5,
                reason="Valid base64 pattern",
                has_padding=has_padding,
            ))

        if _ALPHA_TEXT.match(text) and length >= t.min_classical_length:
            for cipher_type, confidence in (
                (CipherType.ROT13, 0.3),
                (CipherType.CAESAR, 0.3),
                (CipherType.ATBASH, 0.25),
                (CipherType.VIGENERE, 0.2),
                (CipherType.SUBSTITUTION, 0.15),
            ):
                candidates.append(_candidate(cipher_type, confidence, reason="Alphabetic text"))

        if _ALPHA_PUNCT_TEXT.match(text) and length >= t.min_transposition_length:
            for cipher_type in (CipherType.RAIL_FENCE, CipherType.COLUMNAR_TRANSPOSITION):
                candidates.append(_candidate(
                    cipher_type, 0.15, reason="Alpha text with punctuation",
                ))

        return sorted(candidates, key=lambda c: c.confidence, reverse=True)

    def _detect_by_statistics(self, text: str) -> list[DetectionCandidate]:
        """Phase 2: IoC classification, Kasiski examination and entropy."""
        t = self.THRESHOLDS
        stats = self.analyzer.analyze(text)

        if stats.alpha_ratio <= t.min_alpha_ratio or stats.length < t.min_statistical_length:
            return []

        ioc = stats.index_of_coincidence
        classification = stats.classification
        candidates: list[DetectionCandidate] = []

        if classification == IoCClassification.POLYALPHABETIC:
            key_lengths = stats.kasiski_key_lengths
            candidates.append(_candidate(
                CipherType.VIGENERE,
                min(0.7, 0.3 + 0.05 * len(key_lengths)),
                ioc=ioc,
                classification=classification.value,
                likely_key_lengths=key_lengths[:5],
                ioc_key_lengths=stats.ioc_key_lengths,
                distance_gcd=distances_gcd(repeated_trigram_distances(text)),
            ))
        elif classification == IoCClassification.MONOALPHABETIC:
            for cipher_type, confidence in (
                (CipherType.CAESAR, 0.4),
                (CipherType.SUBSTITUTION, 0.35),
                (CipherType.ROT13, 0.3),
                (CipherType.ATBASH, 0.25),
            ):
                candidates.append(_candidate(
                    cipher_type, confidence, ioc=ioc, classification=classification.value,
                ))

        if stats.entropy > t.xor_entropy:
            candidates.append(_candidate(
                CipherType.XOR,
                0.2,
                entropy=stats.entropy,
                reason="High entropy suggests encryption or XOR",
            ))

        return candidates


def _candidate(cipher_type: CipherType, confidence: float, **details: Any) -> DetectionCandidate:
    return DetectionCandidate(cipher_type=cipher_type, confidence=confidence, details=details)
