"""
Plaintext quality scorer.

Combines several independent English-likeness signals into one number so that
candidates coming from very different solvers can be ranked together.
"""

import math
from collections.abc import Callable
from functools import lru_cache
from typing import ClassVar

from codecracker.models.schemas import PlaintextScore
from codecracker.services.analysis.dictionary import dictionary_word_ratio
from codecracker.services.analysis.frequencies import (
    ENGLISH_BIGRAM_FREQ,
    ENGLISH_ENTROPY,
    ENGLISH_LETTER_VECTOR,
    ENGLISH_SPACE_FREQUENCY,
)
from codecracker.services.analysis.statistics import (
    alpha_only,
    bigram_counts,
    chi_squared,
    letter_counts,
    printable_ratio,
    shannon_entropy,
    space_frequency,
)

WordRatioFn = Callable[[str], float]


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(high, max(low, value))


def final_confidence(detection_confidence: float, quality: float) -> float:
    """Fuse detector confidence with decoded-plaintext quality."""
    return _clamp(0.4 * detection_confidence + 0.6 * quality)


class PlaintextScorer:
    """
    Scores how much a candidate plaintext looks like English.

    total = 0.35 * dictionary + 0.25 * letter frequency + 0.15 * bigrams
          + 0.10 * entropy + 0.10 * printable + 0.05 * spaces

    The dictionary signal comes from an injected ``word_ratio`` callable;
    without one it contributes nothing.
    """

    WEIGHTS: ClassVar[dict[str, float]] = {
        "dictionary_word_ratio": 0.35,
        "frequency_fit": 0.25,
        "bigram_fit": 0.15,
        "entropy_score": 0.10,
        "printable_ratio": 0.10,
        "space_frequency": 0.05,
    }

    def __init__(self, word_ratio: WordRatioFn | None = None):
        self.word_ratio = word_ratio

    def score(self, text: str) -> PlaintextScore:
        """
        Score a candidate plaintext.

        Args:
            text: The candidate plaintext

        Returns:
            PlaintextScore with every component in [0, 1]
        """
        components = {
            "dictionary_word_ratio": _clamp(self.word_ratio(text)) if self.word_ratio else 0.0,
            "frequency_fit": self.frequency_fit(text),
            "bigram_fit": self.bigram_fit(text),
            "entropy_score": self.entropy_score(text),
            "printable_ratio": printable_ratio(text),
            "space_frequency": self.space_score(text),
        }
        total = sum(self.WEIGHTS[name] * value for name, value in components.items())

        return PlaintextScore(total=_clamp(total), **components)

    def frequency_fit(self, text: str) -> float:
        """Letter distribution fit: exp(-chi_per_letter / 3)."""
        counts = letter_counts(text)
        total_letters = sum(counts)
        if total_letters < 2:
            return 0.0

        expected = [freq * total_letters for freq in ENGLISH_LETTER_VECTOR]
        chi_per_letter = chi_squared(counts, expected) / total_letters
        return _clamp(math.exp(-chi_per_letter / 3))

    def bigram_fit(self, text: str) -> float:
        """Frequency-weighted agreement with the top English bigrams."""
        clean = alpha_only(text)
        total_bigrams = max(1, len(clean) - 1)
        if total_bigrams < 5:
            return 0.0

        counts = bigram_counts(clean)
        match_score = 0.0
        total_weight = 0.0
        for bigram, expected in ENGLISH_BIGRAM_FREQ.items():
            observed = counts.get(bigram, 0) / total_bigrams
            match_score += expected * max(0.0, 1 - abs(observed - expected) / expected)
            total_weight += expected

        return match_score / total_weight if total_weight else 0.0

    def entropy_score(self, text: str) -> float:
        """Peaks when entropy matches English prose (~4.0 bits/char)."""
        entropy = shannon_entropy(text)
        return max(0.0, 1 - abs(entropy - ENGLISH_ENTROPY) / ENGLISH_ENTROPY)

    def space_score(self, text: str) -> float:
        """Peaks when spaces make up ~17% of the text."""
        frequency = space_frequency(text)
        return max(0.0, 1 - abs(frequency - ENGLISH_SPACE_FREQUENCY) / ENGLISH_SPACE_FREQUENCY)


@lru_cache
def get_default_scorer() -> PlaintextScorer:
    """Shared scorer backed by the embedded English word list."""
    return PlaintextScorer(word_ratio=dictionary_word_ratio)
