from typing import Any


class CryptanalysisError(Exception):
    """Base exception for all cryptanalysis errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CryptanalysisError):
    """Raised when input validation fails."""

    pass


class EmptyInputError(ValidationError):
    """Raised when an operation receives empty text."""

    def __init__(self, what: str = "plaintext"):
        super().__init__(f"Empty {what} provided", {"input": what})


class SolverError(CryptanalysisError):
    """Base exception for cipher solver errors."""

    pass


class SolverNotFoundError(SolverError):
    """Raised when no solver is registered for a cipher type."""

    def __init__(self, cipher_type: str):
        super().__init__(
            f"No solver registered for cipher type: {cipher_type}",
            {"cipher_type": cipher_type},
        )


class EncryptionNotSupportedError(SolverError):
    """Raised when encryption is requested from a decode-only solver."""

    def __init__(self, cipher_type: str):
        super().__init__(
            f"Cipher '{cipher_type}' does not support encryption",
            {"cipher_type": cipher_type},
        )


class InvalidKeyError(SolverError):
    """Raised when a required key is missing or malformed."""

    def __init__(self, cipher_type: str, requirement: str):
        super().__init__(
            f"Cipher '{cipher_type}' requires {requirement}",
            {"cipher_type": cipher_type, "requirement": requirement},
        )
