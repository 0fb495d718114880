from __future__ import annotations

import pytest
from pydantic import ValidationError

from fleet_secrets.config import Settings, get_settings, reset_settings


def test_defaults() -> None:
    s = get_settings()
    assert s.log_level == "INFO"
    assert s.log_file is None
    assert s.log_max_bytes == 500 * 1024 * 1024
    assert s.log_backup_count == 3
    assert s.bcrypt_rounds == 10
    assert s.token_uniform_sampling is False


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("BCRYPT_ROUNDS", "12")
    monkeypatch.setenv("TOKEN_UNIFORM_SAMPLING", "1")
    reset_settings()
    s = get_settings()
    assert s.log_level == "DEBUG"
    assert s.bcrypt_rounds == 12
    assert s.token_uniform_sampling is True


def test_settings_cached() -> None:
    assert get_settings() is get_settings()
    first = get_settings()
    reset_settings()
    assert get_settings() is not first


def test_env_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("BCRYPT_ROUNDS=6\n")
    assert Settings().bcrypt_rounds == 6


@pytest.mark.parametrize("rounds", [3, 32])
def test_rounds_out_of_range(monkeypatch, rounds: int) -> None:
    monkeypatch.setenv("BCRYPT_ROUNDS", str(rounds))
    with pytest.raises(ValidationError):
        Settings()
