"""Symmetric encryption for secrets stored at rest (AES-256-GCM).

Envelope layout: nonce(12) || ciphertext || tag(16). The nonce is drawn fresh
from the OS CSPRNG for every encryption and travels with the ciphertext, so
the caller only has to keep the 32-byte key. Key provisioning and rotation
belong to the caller.
"""
from __future__ import annotations
import base64
import binascii
import logging
import secrets
from typing import Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

# Monitoring
from prometheus_client import Counter

from .errors import CipherInitError, DecryptionFailed, InvalidKeyLength, NonceGenerationError

# Initialize metrics
encryption_operations = Counter('secrets_encryption_operations_total', 'Secret encryption operations', ['operation'])
encryption_errors = Counter('secrets_encryption_errors_total', 'Secret encryption errors', ['error_type'])

logger = logging.getLogger(__name__)

KEY_SIZE = 32  # 256 bits
NONCE_SIZE = 12  # 96-bit nonce for GCM
TAG_SIZE = 16

KeyMaterial = Union[bytes, bytearray, memoryview, str]
_BYTES_LIKE = (bytes, bytearray, memoryview)


def _key_bytes(key: KeyMaterial) -> bytes:
    if isinstance(key, str):
        key = key.encode('utf-8')
    elif not isinstance(key, _BYTES_LIKE):
        encryption_errors.labels(error_type='invalid_key_type').inc()
        raise TypeError(f"key must be str or bytes-like, not {type(key).__name__}")
    key = bytes(key)
    if len(key) != KEY_SIZE:
        encryption_errors.labels(error_type='invalid_key_length').inc()
        raise InvalidKeyLength(KEY_SIZE, len(key))
    return key


def _new_aead(key: bytes) -> AESGCM:
    try:
        return AESGCM(key)
    except Exception as e:
        encryption_errors.labels(error_type='cipher_init').inc()
        logger.error(f"AES-GCM initialisation failed: {type(e).__name__}")
        raise CipherInitError(f'creating cipher: {e}') from e


def aes256_encode(plaintext: Union[str, bytes], key: KeyMaterial) -> bytes:
    """Encrypt ``plaintext`` and return the nonce-prefixed envelope."""
    aead = _new_aead(_key_bytes(key))
    if isinstance(plaintext, str):
        data = plaintext.encode('utf-8')
    elif isinstance(plaintext, _BYTES_LIKE):
        data = bytes(plaintext)
    else:
        raise TypeError(f"plaintext must be str or bytes-like, not {type(plaintext).__name__}")

    try:
        nonce = secrets.token_bytes(NONCE_SIZE)
    except (OSError, NotImplementedError) as e:
        encryption_errors.labels(error_type='nonce_generation').inc()
        logger.error(f"Entropy source unavailable while creating nonce: {e}")
        raise NonceGenerationError(f'creating nonce: {e}') from e
    if len(nonce) != NONCE_SIZE:
        encryption_errors.labels(error_type='nonce_generation').inc()
        raise NonceGenerationError(f'creating nonce: short read ({len(nonce)} bytes)')

    envelope = nonce + aead.encrypt(nonce, data, None)
    encryption_operations.labels(operation='encrypt').inc()
    return envelope


def _open(envelope: bytes, key: KeyMaterial) -> bytes:
    aead = _new_aead(_key_bytes(key))
    if not isinstance(envelope, _BYTES_LIKE):
        raise TypeError(f"envelope must be bytes-like, not {type(envelope).__name__}")
    envelope = bytes(envelope)

    if len(envelope) < NONCE_SIZE:
        encryption_errors.labels(error_type='decryption').inc()
        raise DecryptionFailed()

    nonce, sealed = envelope[:NONCE_SIZE], envelope[NONCE_SIZE:]
    try:
        plaintext = aead.decrypt(nonce, sealed, None)
    except InvalidTag:
        encryption_errors.labels(error_type='decryption').inc()
        logger.warning("Secret decryption failed")
        raise DecryptionFailed() from None
    return plaintext


def aes256_decode_bytes(envelope: bytes, key: KeyMaterial) -> bytes:
    """Open an envelope produced by :func:`aes256_encode` and return raw bytes.

    Every failure after the key check raises the same ``DecryptionFailed``:
    a wrong key, a truncated or modified envelope and a wrong nonce are not
    distinguished from each other.
    """
    plaintext = _open(envelope, key)
    encryption_operations.labels(operation='decrypt').inc()
    return plaintext


def aes256_decode(envelope: bytes, key: KeyMaterial) -> str:
    plaintext = _open(envelope, key)
    try:
        text = plaintext.decode('utf-8')
    except UnicodeDecodeError:
        encryption_errors.labels(error_type='decryption').inc()
        raise DecryptionFailed() from None
    encryption_operations.labels(operation='decrypt').inc()
    return text


def encrypt_secret(value: str, key: KeyMaterial) -> str:
    """Encrypt ``value`` and return the envelope as standard base64 text."""
    return base64.b64encode(aes256_encode(value, key)).decode('ascii')


def decrypt_secret(token: str, key: KeyMaterial) -> str:
    # Validate the key before touching the token so a bad key is always reported as such
    _key_bytes(key)
    try:
        envelope = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError):
        encryption_errors.labels(error_type='decryption').inc()
        raise DecryptionFailed() from None
    return aes256_decode(envelope, key)


__all__ = [
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "aes256_encode",
    "aes256_decode",
    "aes256_decode_bytes",
    "encrypt_secret",
    "decrypt_secret",
]
