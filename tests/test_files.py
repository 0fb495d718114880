from __future__ import annotations

import base64

import pytest

from fleet_secrets.utils.files import file_to_base64


def test_file_to_base64(tmp_path) -> None:
    bundle = tmp_path / "ca.pem"
    content = b"-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n"
    bundle.write_bytes(content)
    assert base64.b64decode(file_to_base64(bundle)) == content
    assert file_to_base64(str(bundle)) == base64.b64encode(content).decode()


def test_empty_file(tmp_path) -> None:
    empty = tmp_path / "empty"
    empty.write_bytes(b"")
    assert file_to_base64(empty) == ""


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        file_to_base64(tmp_path / "missing.pem")
