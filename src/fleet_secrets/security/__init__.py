"""
Secret-handling primitives: authenticated encryption of stored secrets,
secure random tokens, password hashing and input validation.
"""

from .errors import (
    SecretsError,
    InvalidKeyLength,
    CipherInitError,
    NonceGenerationError,
    DecryptionFailed,
    RandomSourceError,
    HashingError,
)

from .crypto import (
    KEY_SIZE,
    NONCE_SIZE,
    aes256_encode,
    aes256_decode,
    aes256_decode_bytes,
    encrypt_secret,
    decrypt_secret,
)

from .tokens import ALPHANUMERIC, get_random_string

from .passwords import password_to_bcrypt, verify_password

from .input_validation import is_valid_email, is_alphanumeric

__all__ = [
    "SecretsError",
    "InvalidKeyLength",
    "CipherInitError",
    "NonceGenerationError",
    "DecryptionFailed",
    "RandomSourceError",
    "HashingError",
    "KEY_SIZE",
    "NONCE_SIZE",
    "aes256_encode",
    "aes256_decode",
    "aes256_decode_bytes",
    "encrypt_secret",
    "decrypt_secret",
    "ALPHANUMERIC",
    "get_random_string",
    "password_to_bcrypt",
    "verify_password",
    "is_valid_email",
    "is_alphanumeric",
]
