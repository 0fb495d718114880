"""Log handler selection: stdout by default, size-rotated file when LOG_FILE is set.

Rotated files are gzip-compressed when ``LOG_COMPRESS`` is on.
"""
from __future__ import annotations
import gzip
import logging
import os
import shutil
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from fleet_secrets.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handler installed on the root logger by the last configure_logging() call
_installed_handler: Optional[logging.Handler] = None


def _gzip_namer(name: str) -> str:
    return name + ".gz"


def _gzip_rotator(source: str, dest: str) -> None:
    with open(source, "rb") as src, gzip.open(dest, "wb") as dst:
        shutil.copyfileobj(src, dst)
    os.remove(source)


def get_logging_handler(settings: Optional[Settings] = None) -> logging.Handler:
    """Return the handler log records should be written to."""
    s = settings or get_settings()
    if not s.log_file:
        return logging.StreamHandler(sys.stdout)

    dirname = os.path.dirname(s.log_file)
    if dirname and not os.path.isdir(dirname):
        try:
            os.makedirs(dirname, mode=0o711, exist_ok=True)
        except OSError as e:
            raise OSError(f"failed to create log folder {dirname}: {e}") from e

    handler = RotatingFileHandler(
        s.log_file,
        maxBytes=s.log_max_bytes,
        backupCount=s.log_backup_count,
        encoding="utf-8",
    )
    if s.log_compress:
        handler.namer = _gzip_namer
        handler.rotator = _gzip_rotator
    return handler


def configure_logging(settings: Optional[Settings] = None) -> logging.Handler:
    """Attach the configured handler to the root logger and set its level.

    Repeated calls replace the handler installed by the previous call.
    """
    global _installed_handler
    s = settings or get_settings()
    handler = get_logging_handler(s)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)
        _installed_handler.close()
    root.addHandler(handler)
    _installed_handler = handler
    root.setLevel(s.log_level)
    logging.getLogger(__name__).debug(f"Logging configured (level={s.log_level}, file={s.log_file or 'stdout'})")
    return handler


__all__ = ["LOG_FORMAT", "get_logging_handler", "configure_logging"]
