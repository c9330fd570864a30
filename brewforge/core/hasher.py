"""Digest helpers for artifact checksums."""

from __future__ import annotations

import hashlib
from pathlib import Path

from brewforge.errors import ChecksumError

_CHUNK_SIZE = 64 * 1024


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def file_digest(path: Path | str, algorithm: str = "sha256") -> str:
    """Return the hex digest of the file at *path*.

    The file is streamed in chunks so large archives are never fully
    loaded.  Unknown algorithms and I/O failures both raise
    ``ChecksumError`` with the path and algorithm in the message.
    """
    try:
        hasher = hashlib.new(algorithm)
    except ValueError as exc:
        raise ChecksumError(f"unsupported checksum algorithm {algorithm!r}") from exc

    try:
        with open(path, "rb") as handle:
            for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
                hasher.update(chunk)
    except OSError as exc:
        raise ChecksumError(f"failed to compute {algorithm} of {path}: {exc}") from exc

    return hasher.hexdigest()
