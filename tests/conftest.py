from __future__ import annotations

import pytest

from fleet_secrets.config import reset_settings

_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_FILE",
    "LOG_MAX_BYTES",
    "LOG_BACKUP_COUNT",
    "LOG_COMPRESS",
    "BCRYPT_ROUNDS",
    "TOKEN_UNIFORM_SAMPLING",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the test run
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def key() -> bytes:
    return bytes(range(32))
