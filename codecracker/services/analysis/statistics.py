import math
import re
from collections import Counter
from functools import reduce
from typing import ClassVar

from codecracker.models.schemas import IoCClassification, StatisticsProfile
from codecracker.services.analysis.charset import analyze_charset
from codecracker.services.analysis.frequencies import (
    ALPHABET,
    ENGLISH_IOC,
    ENGLISH_LETTER_VECTOR,
    RANDOM_IOC,
)

_NON_ALPHA = re.compile(r"[^a-zA-Z]")
_PRINTABLE_CONTROLS = {9, 10, 13}


def mod(a: int, n: int) -> int:
    """Non-negative remainder, safe for shifts that subtract before reducing."""
    return ((a % n) + n) % n


def chi_squared(observed: list[float], expected: list[float]) -> float:
    """Chi-squared statistic, skipping buckets with zero expectation."""
    total = 0.0
    for obs, exp in zip(observed, expected):
        if exp > 0:
            total += (obs - exp) ** 2 / exp
    return total


def alpha_only(text: str) -> str:
    """Lowercased ASCII letters of ``text``."""
    return _NON_ALPHA.sub("", text).lower()


def letter_counts(text: str) -> list[int]:
    """Occurrences of each of the 26 letters, case-folded."""
    counter = Counter(text.lower())
    return [counter.get(letter, 0) for letter in ALPHABET]


def letter_frequencies(text: str) -> list[float]:
    """Letter distribution as proportions; all zeros when there are no letters."""
    counts = letter_counts(text)
    total = sum(counts)
    if total == 0:
        return [0.0] * len(ALPHABET)
    return [count / total for count in counts]


def bigram_counts(text: str) -> Counter:
    """Bigram occurrences over the case-folded letters of ``text``."""
    clean = alpha_only(text)
    return Counter(clean[i:i + 2] for i in range(len(clean) - 1))


def printable_ratio(text: str) -> float:
    """Share of printable ASCII characters (32-126, tab, CR, LF)."""
    if not text:
        return 0.0
    printable = sum(
        1 for char in text
        if 32 <= ord(char) <= 126 or ord(char) in _PRINTABLE_CONTROLS
    )
    return printable / len(text)


def space_frequency(text: str) -> float:
    """Share of space characters in ``text``."""
    if not text:
        return 0.0
    return text.count(" ") / len(text)


def shannon_entropy(text: str) -> float:
    """
    Shannon entropy in bits per character over the raw text.

    English prose is around 4.0, random bytes approach 8.0.
    """
    n = len(text)
    if n == 0:
        return 0.0

    entropy = 0.0
    for count in Counter(text).values():
        p = count / n
        entropy -= p * math.log2(p)
    return entropy


def index_of_coincidence(text: str) -> float:
    """
    Calculate Index of Coincidence over the 26 letters.

    IOC measures how likely two randomly chosen letters are the same.
    - English text: ~0.0667
    - Random text: ~0.0385 (1/26)
    """
    counts = letter_counts(text)
    n = sum(counts)
    if n < 2:
        return 0.0
    return sum(c * (c - 1) for c in counts) / (n * (n - 1))


def chi_squared_vs_english(text: str) -> float:
    """Chi-squared of the letter distribution against English. Lower is better."""
    counts = letter_counts(text)
    total = sum(counts)
    if total == 0:
        return math.inf
    expected = [freq * total for freq in ENGLISH_LETTER_VECTOR]
    return chi_squared(counts, expected)


def classify_by_ioc(text: str) -> IoCClassification:
    """Place text on the monoalphabetic/polyalphabetic side of the IoC midpoint."""
    ioc = index_of_coincidence(text)
    midpoint = (ENGLISH_IOC + RANDOM_IOC) / 2
    if ioc > midpoint + 0.005:
        return IoCClassification.MONOALPHABETIC
    if ioc < midpoint - 0.005:
        return IoCClassification.POLYALPHABETIC
    return IoCClassification.UNKNOWN


def repeated_trigram_distances(text: str) -> list[int]:
    """Distances between every pair of occurrences of each repeated trigram."""
    clean = alpha_only(text)
    positions: dict[str, list[int]] = {}
    for i in range(len(clean) - 2):
        positions.setdefault(clean[i:i + 3], []).append(i)

    distances = []
    for occurrences in positions.values():
        if len(occurrences) < 2:
            continue
        for i in range(len(occurrences) - 1):
            for j in range(i + 1, len(occurrences)):
                distances.append(occurrences[j] - occurrences[i])
    return distances


def distances_gcd(distances: list[int]) -> int:
    """Greatest common divisor of all distances, 0 when there are none."""
    return reduce(math.gcd, distances, 0)


def kasiski_examination(
    text: str,
    max_key_length: int = 20,
    min_length: int = 20,
) -> list[int]:
    """
    Estimate repeating-key lengths from repeated trigram distances.

    Every factor 2..max_key_length of every distance gets a vote; factors are
    returned most voted first, ties in the order they were first seen.
    """
    if len(alpha_only(text)) < min_length:
        return []

    distances = repeated_trigram_distances(text)
    if not distances:
        return []

    factor_counts: Counter = Counter()
    for distance in distances:
        for factor in range(2, min(max_key_length, distance) + 1):
            if distance % factor == 0:
                factor_counts[factor] += 1

    ranked = sorted(factor_counts.items(), key=lambda item: -item[1])
    return [factor for factor, _ in ranked]


def estimate_key_length_by_ioc(text: str, max_key_length: int = 20) -> list[int]:
    """
    Rank key lengths by how English-like the average column IoC becomes.

    The text is split into ``key_length`` interleaved columns; for the right
    length every column is a plain Caesar shift and keeps the English IoC.
    """
    clean = alpha_only(text)
    if len(clean) < 20:
        return []

    scored = []
    for key_length in range(2, min(max_key_length, len(clean) // 3) + 1):
        columns = [clean[col::key_length] for col in range(key_length)]
        average = sum(index_of_coincidence(c) for c in columns) / key_length
        scored.append((abs(average - ENGLISH_IOC), key_length))

    scored.sort()
    return [key_length for _, key_length in scored]


class StatisticalAnalyzer:
    """
    Statistical profile of a ciphertext for cipher family detection.

    Computes the measures that separate monoalphabetic from polyalphabetic
    text: index of coincidence, entropy and key length estimates.
    """

    MAX_KEY_LENGTHS: ClassVar[int] = 5

    def analyze(self, text: str) -> StatisticsProfile:
        """
        Perform statistical analysis on text.

        Args:
            text: Raw (trimmed) ciphertext

        Returns:
            StatisticsProfile with all computed statistics
        """
        charset = analyze_charset(text)
        classification = classify_by_ioc(text)

        kasiski: list[int] = []
        if classification == IoCClassification.POLYALPHABETIC:
            kasiski = kasiski_examination(text)

        return StatisticsProfile(
            length=charset.total_chars,
            alpha_ratio=charset.alpha_ratio,
            index_of_coincidence=index_of_coincidence(text),
            entropy=shannon_entropy(text),
            classification=classification,
            kasiski_key_lengths=kasiski,
            ioc_key_lengths=estimate_key_length_by_ioc(text)[:self.MAX_KEY_LENGTHS],
        )
