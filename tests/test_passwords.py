from __future__ import annotations

import pytest

from fleet_secrets.config import reset_settings
from fleet_secrets.security.errors import HashingError
from fleet_secrets.security.passwords import (
    DEFAULT_COST,
    MAX_PASSWORD_BYTES,
    password_to_bcrypt,
    verify_password,
)


def test_hash_uses_default_cost() -> None:
    hashed = password_to_bcrypt("correct horse battery staple")
    assert hashed.startswith("$2")
    assert hashed.split("$")[2] == f"{DEFAULT_COST:02d}"


def test_hash_verifies() -> None:
    hashed = password_to_bcrypt("s3cret!", rounds=4)
    assert verify_password("s3cret!", hashed)
    assert not verify_password("s3cret?", hashed)


def test_hashes_are_salted() -> None:
    assert password_to_bcrypt("same", rounds=4) != password_to_bcrypt("same", rounds=4)


def test_rounds_from_settings(monkeypatch) -> None:
    monkeypatch.setenv("BCRYPT_ROUNDS", "5")
    reset_settings()
    assert password_to_bcrypt("pw").split("$")[2] == "05"


def test_overlong_password_rejected() -> None:
    with pytest.raises(HashingError):
        password_to_bcrypt("x" * (MAX_PASSWORD_BYTES + 1), rounds=4)


def test_password_at_limit_accepted() -> None:
    password = "x" * MAX_PASSWORD_BYTES
    assert verify_password(password, password_to_bcrypt(password, rounds=4))


def test_invalid_rounds_rejected() -> None:
    with pytest.raises(HashingError):
        password_to_bcrypt("pw", rounds=2)


def test_verify_malformed_hash_is_false() -> None:
    assert not verify_password("pw", "not-a-bcrypt-hash")


def test_verify_overlong_password_is_false() -> None:
    hashed = password_to_bcrypt("x" * MAX_PASSWORD_BYTES, rounds=4)
    assert not verify_password("x" * (MAX_PASSWORD_BYTES + 1), hashed)
