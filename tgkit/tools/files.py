"""Whole-file binary reading and writing."""

from __future__ import annotations

import os
from pathlib import Path


def read_file(file_path: str | os.PathLike[str]) -> bytes:
    """Return the complete contents of ``file_path``.

    Raises OSError if the file cannot be read.
    """
    return Path(file_path).read_bytes()


def write_file(content: str | bytes, file_path: str | os.PathLike[str]) -> None:
    """Replace the contents of ``file_path`` with ``content``.

    Text is written as UTF-8. Raises OSError if the file cannot be written.
    """
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    Path(file_path).write_bytes(data)