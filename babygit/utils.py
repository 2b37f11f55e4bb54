"""Hashing and filesystem helpers."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path


def calculate_hash(content: bytes | str) -> str:
    """Return the SHA-1 hex digest of ``content`` (text is UTF-8 encoded)."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha1(content).hexdigest()


def file_exists(path: str | os.PathLike) -> bool:
    """Return True if anything exists at ``path``."""
    return os.path.exists(path)


def ensure_directory_exists(path: str | os.PathLike) -> None:
    """Create the directory at ``path`` unless something is already there."""
    if not file_exists(path):
        Path(path).mkdir()