"""
Input validation helpers for user-supplied identifiers.
"""
import re
import unicodedata

MAX_EMAIL_LENGTH = 254

# Compiled once at import; the pattern object is immutable and shared
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def is_valid_email(email: str) -> bool:
    """Return True if ``email`` is syntactically a valid address."""
    if len(email) > MAX_EMAIL_LENGTH:
        return False
    # fullmatch: "$" alone would accept a trailing newline
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_alphanumeric(value: str) -> bool:
    """Return True if every character is a Unicode letter or number."""
    return all(unicodedata.category(ch)[0] in ("L", "N") for ch in value)


__all__ = ["EMAIL_PATTERN", "MAX_EMAIL_LENGTH", "is_valid_email", "is_alphanumeric"]
