"""Small file helpers used for configuration and checksum handling."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

READ_BUFFER_SIZE = 8192


def read_chunks(path: PathLike, chunk_size: int = READ_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield the contents of ``path`` in blocks of at most ``chunk_size`` bytes."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    with open(path, "rb") as handle:
        while chunk := handle.read(chunk_size):
            yield chunk


def read_text_file(path: PathLike) -> str:
    """Return the whole content of a text file."""
    return b"".join(read_chunks(path)).decode("utf-8", errors="replace")


def file_exists(path: PathLike) -> bool:
    """Return True if something exists at ``path``."""
    return os.access(path, os.F_OK)


def dir_exists(path: PathLike) -> bool:
    """Return True if ``path`` is an existing directory."""
    return Path(path).is_dir()


def get_file_size(path: PathLike) -> int:
    """Return the size of the file at ``path`` in bytes."""
    return os.stat(path).st_size