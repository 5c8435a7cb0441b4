"""Reference English language statistics."""

import string

ALPHABET = string.ascii_lowercase

# Letter frequencies as proportions, in alphabetical order
ENGLISH_LETTER_FREQ: dict[str, float] = {
    "a": 0.08167, "b": 0.01492, "c": 0.02782, "d": 0.04253, "e": 0.12702,
    "f": 0.02228, "g": 0.02015, "h": 0.06094, "i": 0.06966, "j": 0.00153,
    "k": 0.00772, "l": 0.04025, "m": 0.02406, "n": 0.06749, "o": 0.07507,
    "p": 0.01929, "q": 0.00095, "r": 0.05987, "s": 0.06327, "t": 0.09056,
    "u": 0.02758, "v": 0.00978, "w": 0.02360, "x": 0.00150, "y": 0.01974,
    "z": 0.00074,
}

ENGLISH_LETTER_VECTOR: list[float] = [ENGLISH_LETTER_FREQ[c] for c in ALPHABET]

# Most common English letters first
ENGLISH_FREQ_ORDER = "etaoinshrdlcumwfgypbvkjxqz"

# Top 50 English bigrams with relative frequencies
ENGLISH_BIGRAM_FREQ: dict[str, float] = {
    "th": 0.0356, "he": 0.0307, "in": 0.0243, "er": 0.0205, "an": 0.0199,
    "re": 0.0185, "on": 0.0176, "at": 0.0149, "en": 0.0145, "nd": 0.0135,
    "ti": 0.0134, "es": 0.0134, "or": 0.0128, "te": 0.0120, "of": 0.0117,
    "ed": 0.0117, "is": 0.0113, "it": 0.0112, "al": 0.0109, "ar": 0.0107,
    "st": 0.0105, "to": 0.0104, "nt": 0.0104, "ng": 0.0095, "se": 0.0093,
    "ha": 0.0093, "as": 0.0087, "ou": 0.0087, "io": 0.0083, "le": 0.0083,
    "ve": 0.0083, "co": 0.0079, "me": 0.0079, "de": 0.0076, "hi": 0.0076,
    "ri": 0.0073, "ro": 0.0073, "ic": 0.0070, "ne": 0.0069, "ea": 0.0069,
    "ra": 0.0069, "ce": 0.0065, "li": 0.0062, "ch": 0.0060, "ll": 0.0058,
    "be": 0.0058, "ma": 0.0057, "si": 0.0055, "om": 0.0055, "ur": 0.0054,
}

# Index of coincidence for English text and for uniformly random letters
ENGLISH_IOC = 0.0667
RANDOM_IOC = 0.0385

# Shannon entropy of English prose in bits per character
ENGLISH_ENTROPY = 4.0

# Share of spaces in English prose
ENGLISH_SPACE_FREQUENCY = 0.17
