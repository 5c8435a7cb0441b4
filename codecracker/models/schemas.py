from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"
    POLYGRAPHIC = "polygraphic"
    ENCODING = "encoding"
    MODERN = "modern"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    ROT13 = "rot13"
    ATBASH = "atbash"
    VIGENERE = "vigenere"
    SUBSTITUTION = "substitution"
    RAIL_FENCE = "rail-fence"
    PLAYFAIR = "playfair"
    COLUMNAR_TRANSPOSITION = "columnar-transposition"
    BASE64 = "base64"
    BASE32 = "base32"
    HEX = "hex"
    BINARY = "binary"
    URL_ENCODING = "url-encoding"
    MORSE = "morse"
    XOR = "xor"
    HASH_LOOKUP = "hash-lookup"
    AES = "aes"
    RSA = "rsa"


class IoCClassification(str, Enum):
    """Cipher class suggested by the index of coincidence."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    UNKNOWN = "unknown"


# ============================================================================
# Statistics Schemas
# ============================================================================


class StatisticsProfile(BaseModel):
    """Statistical profile used by the detector's second phase."""

    model_config = ConfigDict(from_attributes=True)

    length: int
    alpha_ratio: float = Field(ge=0.0, le=1.0)
    index_of_coincidence: float
    entropy: float
    classification: IoCClassification
    kasiski_key_lengths: list[int] = []
    ioc_key_lengths: list[int] = []


class PlaintextScore(BaseModel):
    """Composite English-likeness score of a candidate plaintext."""

    model_config = ConfigDict(frozen=True)

    total: float = Field(ge=0.0, le=1.0)
    dictionary_word_ratio: float = Field(ge=0.0, le=1.0)
    frequency_fit: float = Field(ge=0.0, le=1.0)
    bigram_fit: float = Field(ge=0.0, le=1.0)
    entropy_score: float = Field(ge=0.0, le=1.0)
    printable_ratio: float = Field(ge=0.0, le=1.0)
    space_frequency: float = Field(ge=0.0, le=1.0)


# ============================================================================
# Detection Schemas
# ============================================================================


class DetectionCandidate(BaseModel):
    """A hypothesis about the cipher type."""

    cipher_type: CipherType
    confidence: float = Field(ge=0.0, le=1.0)
    details: dict[str, Any] = Field(default_factory=dict)


# ============================================================================
# Solving Schemas
# ============================================================================


class SolverOptions(BaseModel):
    """Options passed through unchanged to a solver."""

    key: str | bytes | None = None
    iv: str | bytes | None = None
    max_results: int | None = Field(default=None, ge=1)


class CrackOptions(SolverOptions):
    """Options for automatic cracking; unset limits fall back to settings."""

    max_depth: int | None = Field(default=None, ge=0)
    min_confidence: float | None = Field(default=None, ge=0.0, le=1.0)


class CrackResult(BaseModel):
    """A candidate plaintext produced by a solver."""

    plaintext: str
    cipher_type: CipherType
    confidence: float = Field(ge=0.0, le=1.0)
    key: str | int | None = None
    details: dict[str, Any] = Field(default_factory=dict)


class CrackResponse(BaseModel):
    """Ranked results of a crack plus advisory warnings."""

    results: list[CrackResult] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class EncryptResult(BaseModel):
    """Output of a solver's encrypt operation."""

    ciphertext: str
    cipher_type: CipherType
    key: str | int | None = None
    details: dict[str, Any] = Field(default_factory=dict)


# ============================================================================
# Request Schemas
# ============================================================================


class CrackRequest(BaseModel):
    """Request schema for /crack endpoint."""

    ciphertext: str = Field(min_length=1)
    key: str | None = None
    iv: str | None = None
    max_results: int | None = Field(default=None, ge=1, le=100)
    max_depth: int | None = Field(default=None, ge=0, le=5)
    min_confidence: float | None = Field(default=None, ge=0.0, le=1.0)


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1)
    cipher_type: str
    key: str | None = None
    iv: str | None = None
    max_results: int | None = Field(default=None, ge=1, le=100)


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1)
    cipher_type: str
    key: str | None = None
    iv: str | None = None


class DetectRequest(BaseModel):
    """Request schema for /detect endpoint."""

    ciphertext: str


# ============================================================================
# Response Schemas
# ============================================================================


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    results: list[CrackResult]


class DetectResponse(BaseModel):
    """Response schema for /detect endpoint."""

    candidates: list[DetectionCandidate]


class SolversResponse(BaseModel):
    """Response schema for /solvers endpoint."""

    registered: list[CipherType]
    encryptable: list[CipherType]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
