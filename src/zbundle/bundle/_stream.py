"""Chunked copy helper for archive entries.

`pump()` moves bytes between a reader and a writer one chunk at a time and
reports read-side and write-side failures as different errors. `CHUNK_SIZE`
also sets the read size used by `hashing.hash_file`.
"""

from __future__ import annotations

from typing import Callable

# One chunk is resident at a time; keeps memory bounded on large files.
CHUNK_SIZE = 1024 * 1024


def pump(
    read: Callable[[int], bytes],
    write: Callable[[bytes], object],
    *,
    read_error: Exception,
    write_error: Exception,
    read_exceptions: tuple[type[BaseException], ...] = (OSError,),
    write_exceptions: tuple[type[BaseException], ...] = (OSError,),
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """Copy from `read` to `write` until EOF and return the byte count.

    Failures on the read side raise `read_error`, failures on the write side
    raise `write_error`; both chain the underlying exception.
    """
    total = 0
    while True:
        try:
            chunk = read(chunk_size)
        except read_exceptions as e:
            raise read_error from e
        if not chunk:
            return total
        try:
            write(chunk)
        except write_exceptions as e:
            raise write_error from e
        total += len(chunk)
