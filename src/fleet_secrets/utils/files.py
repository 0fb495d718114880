from __future__ import annotations
import base64
from pathlib import Path
from typing import Union


def file_to_base64(path: Union[str, Path]) -> str:
    """Read ``path`` and return its contents as standard base64 text.

    Used for CA bundles and similar files embedded in bootstrap configuration.
    """
    return base64.b64encode(Path(path).read_bytes()).decode('ascii')


__all__ = ["file_to_base64"]
