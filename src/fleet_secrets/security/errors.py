"""Exception types raised by the secret-handling primitives."""
from __future__ import annotations


class SecretsError(Exception):
    """Base class for every error raised by fleet_secrets.security."""


class InvalidKeyLength(SecretsError, ValueError):
    """Key material is not exactly 32 bytes."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid passphrase length (expected {expected} bytes, got {actual})")


class CipherInitError(SecretsError):
    pass


class NonceGenerationError(SecretsError):
    pass


class DecryptionFailed(SecretsError):
    """Generic decryption failure; the cause is intentionally not exposed."""

    def __init__(self, message: str = "failed to decrypt text"):
        super().__init__(message)


class RandomSourceError(SecretsError):
    pass


class HashingError(SecretsError):
    pass


__all__ = [
    "SecretsError",
    "InvalidKeyLength",
    "CipherInitError",
    "NonceGenerationError",
    "DecryptionFailed",
    "RandomSourceError",
    "HashingError",
]
