"""SHA-256 helpers used to identify bundles on disk.

Hashing is not part of archive construction; hosts use it to verify an archive
or to key a cache directory (see `zbundle.bundle.cache`).
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from zbundle.core.errors import OpenError, ReadError

from ._stream import CHUNK_SIZE

logger = logging.getLogger(__name__)


def sha256_bytes(b: bytes) -> str:
    """Return hex-encoded sha256 for bytes."""
    if not isinstance(b, (bytes, bytearray)):
        raise TypeError(f"sha256_bytes: expected bytes, got {type(b).__name__}")
    return hashlib.sha256(bytes(b)).hexdigest()


def hash_file(file_path: str | Path) -> str:
    """Return hex-encoded sha256 for a file on disk, streamed in fixed-size chunks.

    Raises:
        OpenError: the file cannot be opened.
        ReadError: reading the file fails part-way.
    """
    p = Path(file_path)
    try:
        f = p.open("rb")
    except OSError as e:
        raise OpenError(f"Failed to open the file: {p}", path=p) from e

    h = hashlib.sha256()
    with f:
        while True:
            try:
                chunk = f.read(CHUNK_SIZE)
            except OSError as e:
                raise ReadError(f"Failed to read the file: {p}", path=p) from e
            if not chunk:
                break
            h.update(chunk)

    digest = h.hexdigest()
    logger.debug("sha256 %s = %s", p, digest)
    return digest
