"""Bundler: pack an ordered list of entries into one ZIP archive.

Archive layout:
- one entry per descriptor, in input order (no sorting, no deduplication)
- every content entry is compressed with Deflate
- bundled paths ending in `/` become zero-length directory entries; their
  content source is ignored and never opened
- an empty entry list yields a valid empty archive

Entry metadata comes from the content source:
- file references keep the source's mtime and permission bits (`fstat`)
- inline content and directory markers carry the ZIP epoch (1980-01-01) and
  fixed modes, so the same entries always produce the same archive bytes

File references are opened before their archive entry is started and are
streamed in `CHUNK_SIZE` pieces, so at most one chunk of one entry is in memory.

Failure policy is fail-fast: the first error aborts the call. The partial output
is left on disk unless `cleanup_on_error=True`.
"""

from __future__ import annotations

import io
import logging
import os
import stat
import time
import zipfile
from pathlib import Path
from typing import Callable, Iterable, Optional

from zbundle.core.errors import BundleError, OpenError, ReadError, WriteError
from zbundle.core.model import BundleEntry, FileReference, InlineContent

from ._stream import pump

logger = logging.getLogger(__name__)

COMPRESSION = zipfile.ZIP_DEFLATED

# Earliest and latest timestamps the ZIP date/time fields can hold.
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
ZIP_MAX_DATE_TIME = (2107, 12, 31, 23, 59, 59)

# zipfile raises RuntimeError for size overflows and ValueError for misuse of
# a closed/busy archive; both are write-side failures here.
_WRITE_EXCEPTIONS: tuple[type[BaseException], ...] = (OSError, ValueError, RuntimeError)

_INLINE_MODE = stat.S_IFREG | 0o644
# drwxrwxr-x; the MS-DOS directory flag is added separately.
_DIR_MODE = stat.S_IFDIR | 0o775
_MSDOS_DIR_FLAG = 0x10


def _validate_level(compresslevel: Optional[int]) -> Optional[int]:
    if compresslevel is None:
        return None
    if isinstance(compresslevel, bool) or not isinstance(compresslevel, int):
        raise TypeError(f"compresslevel: expected int, got {type(compresslevel).__name__}")
    if not 0 <= compresslevel <= 9:
        raise ValueError(f"compresslevel: expected 0..9, got {compresslevel}")
    return compresslevel


def _zip_date_time(mtime: float) -> tuple[int, int, int, int, int, int]:
    """Local-time ZIP timestamp for `mtime`, clamped to the representable range."""
    date_time = tuple(time.localtime(mtime)[:6])
    if date_time < ZIP_EPOCH:
        return ZIP_EPOCH
    if date_time > ZIP_MAX_DATE_TIME:
        return ZIP_MAX_DATE_TIME
    return date_time  # type: ignore[return-value]


def _new_info(
    archive: zipfile.ZipFile,
    name: str,
    *,
    mode: int,
    date_time: tuple[int, int, int, int, int, int] = ZIP_EPOCH,
    file_size: int = 0,
) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(name, date_time=date_time)
    info.compress_type = archive.compression
    info._compresslevel = archive.compresslevel
    info.external_attr = (mode & 0xFFFF) << 16
    # Size hint only; zipfile uses it to decide on zip64 headers.
    info.file_size = file_size
    return info


def _write_directory_marker(archive: zipfile.ZipFile, name: str) -> None:
    info = _new_info(archive, name, mode=_DIR_MODE)
    info.compress_type = zipfile.ZIP_STORED
    info.external_attr |= _MSDOS_DIR_FLAG
    try:
        archive.writestr(info, b"")
    except _WRITE_EXCEPTIONS as e:
        raise WriteError(f"Failed to write the folder: {name}", path=name) from e


def _write_stream(
    archive: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    read: Callable[[int], bytes],
    *,
    source: str | Path,
) -> int:
    """Start entry `info`, stream `read` into it, and finish it."""
    name = info.filename
    try:
        dest = archive.open(info, "w")
    except _WRITE_EXCEPTIONS as e:
        raise WriteError(f"Failed to start the entry: {name}", path=name) from e

    write_error = WriteError(f"Failed to write content of: {name}", path=name)
    try:
        with dest:
            return pump(
                read,
                dest.write,
                read_error=ReadError(f"Failed to read the file: {source}", path=source),
                write_error=write_error,
                write_exceptions=_WRITE_EXCEPTIONS,
            )
    except _WRITE_EXCEPTIONS as e:
        # Raised while finalizing the entry header on close.
        raise write_error from e


def _write_inline(archive: zipfile.ZipFile, name: str, content: InlineContent) -> int:
    data = content.encode()
    info = _new_info(archive, name, mode=_INLINE_MODE, file_size=len(data))
    return _write_stream(archive, info, io.BytesIO(data).read, source=name)


def _write_file(archive: zipfile.ZipFile, name: str, content: FileReference) -> int:
    path = content.path
    try:
        f = path.open("rb")
    except OSError as e:
        raise OpenError(f"Failed to open the file: {path}", path=path) from e

    with f:
        try:
            st = os.fstat(f.fileno())
        except OSError as e:
            raise ReadError(f"Failed to read the file: {path}", path=path) from e
        info = _new_info(
            archive,
            name,
            mode=st.st_mode,
            date_time=_zip_date_time(st.st_mtime),
            file_size=st.st_size,
        )
        return _write_stream(archive, info, f.read, source=path)


def _write_entry(archive: zipfile.ZipFile, entry: BundleEntry) -> None:
    name = entry.bundled_path
    if entry.is_directory:
        _write_directory_marker(archive, name)
        logger.debug("bundled folder %s", name)
        return

    content = entry.content
    if isinstance(content, InlineContent):
        n = _write_inline(archive, name, content)
    else:
        n = _write_file(archive, name, content)
    logger.debug("bundled %s (%d bytes)", name, n)


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        return
    except OSError:
        logger.warning("could not remove partial archive %s", path, exc_info=True)


def bundle(
    entries: Iterable[BundleEntry],
    output_file_path: str | Path,
    *,
    compresslevel: Optional[int] = None,
    cleanup_on_error: bool = False,
) -> Path:
    """Write `entries` into a new ZIP archive at `output_file_path`.

    The output file is created or overwritten. Its parent directory must exist.

    Args:
        entries: descriptors, written strictly in iteration order.
        output_file_path: archive destination.
        compresslevel: Deflate level 0..9 (None = zlib default).
        cleanup_on_error: remove the partial archive before re-raising.

    Returns:
        The output path.

    Raises:
        OpenError: the output file or a referenced source file cannot be opened.
        ReadError: a referenced source file cannot be fully read.
        WriteError: an entry cannot be started/written or the archive cannot be finished.
    """
    out = Path(output_file_path)
    level = _validate_level(compresslevel)

    items = list(entries)
    for i, entry in enumerate(items):
        if not isinstance(entry, BundleEntry):
            raise TypeError(f"entries[{i}]: expected BundleEntry, got {type(entry).__name__}")

    try:
        archive = zipfile.ZipFile(out, "w", compression=COMPRESSION, compresslevel=level)
    except OSError as e:
        raise OpenError(f"Failed to create the output file: {out}", path=out) from e

    try:
        with archive:
            for entry in items:
                _write_entry(archive, entry)
    except BundleError:
        if cleanup_on_error:
            _discard(out)
        raise
    except _WRITE_EXCEPTIONS as e:
        if cleanup_on_error:
            _discard(out)
        raise WriteError(f"Failed to finish the archive: {out}", path=out) from e

    logger.info("bundled %d entries into %s", len(items), out)
    return out
