"""Secure random tokens for instance and callback credentials.

Tokens are drawn from the OS CSPRNG and mapped onto a 62-symbol
alphanumeric alphabet. The default mapping is ``byte % 62``, which keeps
legacy token distributions but slightly favours the first ``256 % 62``
symbols. Rejection sampling removes that bias and can be enabled per call
or through ``TOKEN_UNIFORM_SAMPLING``.
"""
from __future__ import annotations
import logging
import secrets
from typing import Optional

from prometheus_client import Counter

from fleet_secrets.config import get_settings
from .errors import RandomSourceError

tokens_generated = Counter('secrets_tokens_generated_total', 'Random tokens generated', ['sampling'])
token_errors = Counter('secrets_token_errors_total', 'Random token generation errors', ['error_type'])

logger = logging.getLogger(__name__)

ALPHANUMERIC = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

# Largest multiple of len(ALPHANUMERIC) that fits in a byte (248)
_UNBIASED_LIMIT = 256 - (256 % len(ALPHANUMERIC))


def _read_random(n: int) -> bytes:
    try:
        data = secrets.token_bytes(n)
    except (OSError, NotImplementedError) as e:
        token_errors.labels(error_type='random_source').inc()
        logger.error(f"Entropy source unavailable: {e}")
        raise RandomSourceError(f'getting random data: {e}') from e
    if len(data) != n:
        token_errors.labels(error_type='random_source').inc()
        raise RandomSourceError(f'getting random data: short read ({len(data)} of {n} bytes)')
    return data


def _modulo_token(length: int) -> str:
    alphabet_size = len(ALPHANUMERIC)
    return ''.join(ALPHANUMERIC[b % alphabet_size] for b in _read_random(length))


def _uniform_token(length: int) -> str:
    alphabet_size = len(ALPHANUMERIC)
    chars: list[str] = []
    while len(chars) < length:
        # Roughly 3% of bytes are rejected; over-read a little to avoid extra syscalls
        needed = length - len(chars)
        for b in _read_random(needed + needed // 16 + 1):
            if b >= _UNBIASED_LIMIT:
                continue
            chars.append(ALPHANUMERIC[b % alphabet_size])
            if len(chars) == length:
                break
    return ''.join(chars)


def get_random_string(length: int, uniform: Optional[bool] = None) -> str:
    """Return a secure random alphanumeric string of exactly ``length`` chars.

    Args:
        length: Number of characters to produce. Must not be negative.
        uniform: Use rejection sampling. ``None`` falls back to settings.

    Raises:
        RandomSourceError: If the entropy source cannot supply bytes.
        pydantic.ValidationError: If ``uniform`` is None and the environment
            holds an invalid setting; pass ``uniform`` explicitly to skip
            the settings lookup.
    """
    if length < 0:
        raise ValueError(f"token length must not be negative, got {length}")
    if uniform is None:
        uniform = get_settings().token_uniform_sampling
    if length == 0:
        return ""

    token = _uniform_token(length) if uniform else _modulo_token(length)
    tokens_generated.labels(sampling='uniform' if uniform else 'modulo').inc()
    return token


__all__ = ["ALPHANUMERIC", "get_random_string"]
