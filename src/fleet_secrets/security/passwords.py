"""Password hashing for the authentication subsystem (bcrypt)."""
from __future__ import annotations
import logging
from typing import Optional

import bcrypt
from prometheus_client import Counter

from fleet_secrets.config import get_settings
from .errors import HashingError

password_hashes = Counter('secrets_password_hashes_total', 'Password hash operations', ['result'])

logger = logging.getLogger(__name__)

DEFAULT_COST = 10
# bcrypt only looks at the first 72 bytes of input
MAX_PASSWORD_BYTES = 72


def password_to_bcrypt(password: str, rounds: Optional[int] = None) -> str:
    """Hash password using bcrypt with the configured work factor."""
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    secret = password.encode('utf-8')
    if len(secret) > MAX_PASSWORD_BYTES:
        password_hashes.labels(result='rejected').inc()
        raise HashingError(f'failed to hash password: longer than {MAX_PASSWORD_BYTES} bytes')
    try:
        hashed = bcrypt.hashpw(secret, bcrypt.gensalt(rounds=rounds))
    except ValueError as e:
        password_hashes.labels(result='rejected').inc()
        logger.warning(f"Password hashing rejected input: {e}")
        raise HashingError(f'failed to hash password: {e}') from e
    password_hashes.labels(result='success').inc()
    return hashed.decode('ascii')


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    secret = password.encode('utf-8')
    if len(secret) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(secret, hashed_password.encode('utf-8'))
    except ValueError:
        logger.debug("Malformed password hash supplied for verification")
        return False


__all__ = ["DEFAULT_COST", "MAX_PASSWORD_BYTES", "password_to_bcrypt", "verify_password"]
