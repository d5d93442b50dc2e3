"""Checksum computation for downloaded files."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum

from .files import PathLike, read_chunks


class HashType(Enum):
    """Supported hash algorithms."""

    MD5 = "md5"


_HEX_VALUES = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


@dataclass(frozen=True)
class HashAlgorithm:
    """A hash algorithm with helpers for files, strings and hex digests."""

    hash_type: HashType

    @property
    def hash_size(self) -> int:
        return hashlib.new(self.hash_type.value).digest_size

    def _new(self):
        return hashlib.new(self.hash_type.value)

    def hash_file(self, path: PathLike) -> bytes:
        """Return the digest of the file at ``path``."""
        digest = self._new()
        for chunk in read_chunks(path):
            digest.update(chunk)
        return digest.digest()

    def hash_string(self, text: str, iterations: int = 1) -> bytes:
        """Return the digest of ``text`` fed ``iterations`` times."""
        digest = self._new()
        data = text.encode("utf-8")
        for _ in range(iterations):
            digest.update(data)
        return digest.digest()

    def equals(self, hash1: bytes, hash2: bytes) -> bool:
        """Compare the first ``hash_size`` bytes of two digests."""
        size = self.hash_size
        return bytes(hash1[:size]) == bytes(hash2[:size])

    def hex_to_binary(self, hash_string: str) -> bytes:
        """Convert a hex digest to bytes; characters that are not hex count as zero."""
        size = self.hash_size
        if len(hash_string) < 2 * size:
            raise ValueError(
                f"hash string needs {2 * size} hex digits, got {len(hash_string)}"
            )
        return bytes(
            (_HEX_VALUES.get(hash_string[j], 0) << 4) | _HEX_VALUES.get(hash_string[j + 1], 0)
            for j in range(0, 2 * size, 2)
        )


def create_hash_algorithm(name: str) -> HashAlgorithm | None:
    """Return the algorithm called ``name`` (currently only "MD5"), or None."""
    if name == "MD5":
        return HashAlgorithm(HashType.MD5)
    return None