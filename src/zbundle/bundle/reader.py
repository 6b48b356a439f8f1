"""Unbundler: materialize every entry of a ZIP archive under a destination root.

Entries are processed in the archive's stored order. For each entry the
destination is `root / <stored name>`:
- names ending in `/` create that directory (and missing ancestors)
- other names create missing ancestors, then create/overwrite the file and
  stream the decompressed body into it

The root itself is only created when an entry needs it, so an empty archive
leaves the filesystem untouched.

Stored names are trusted verbatim unless `safe_paths=True`, which rejects
absolute names, drive-qualified names and `..` segments.

Failure policy is fail-fast; entries extracted before the failing one remain on
disk.
"""

from __future__ import annotations

import logging
import zipfile
import zlib
from pathlib import Path, PurePosixPath, PureWindowsPath

from zbundle.core.errors import DirectoryError, FormatError, OpenError, ReadError, UnsafePathError, WriteError

from ._stream import pump

logger = logging.getLogger(__name__)

# Decompression problems surface from zipfile under several types:
# CRC mismatch / bad headers (BadZipFile), corrupt deflate data (zlib.error),
# truncated streams (EOFError), unsupported methods (NotImplementedError) and
# encrypted members (RuntimeError).
_MEMBER_READ_EXCEPTIONS: tuple[type[BaseException], ...] = (
    OSError,
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    NotImplementedError,
    RuntimeError,
)


def check_member_path(name: str) -> str:
    """Raise UnsafePathError if `name` would escape the extraction root."""
    posix = PurePosixPath(name)
    win = PureWindowsPath(name)
    if posix.is_absolute() or win.drive or win.root:
        raise UnsafePathError(f"Refusing absolute entry path: {name}", path=name)
    if ".." in posix.parts or ".." in win.parts:
        raise UnsafePathError(f"Refusing entry path with '..' segment: {name}", path=name)
    return name


def _make_dirs(path: Path, *, message: str) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryError(message, path=path) from e


def _extract_member(archive: zipfile.ZipFile, info: zipfile.ZipInfo, root: Path) -> Path:
    dest = root / info.filename

    if info.is_dir():
        _make_dirs(dest, message=f"Failed to create the folder: {dest}")
        logger.debug("created folder %s", dest)
        return dest

    _make_dirs(dest.parent, message=f"Failed to create parent directory: {dest}")

    # Open the member first so an unreadable entry never truncates an existing file.
    try:
        member = archive.open(info)
    except _MEMBER_READ_EXCEPTIONS as e:
        raise ReadError(f"Failed to read zip entry: {info.filename}", path=info.filename) from e

    with member:
        try:
            out = dest.open("wb")
        except OSError as e:
            raise OpenError(f"Failed to create the file: {dest}", path=dest) from e
        with out:
            n = pump(
                member.read,
                out.write,
                read_error=ReadError(f"Failed to read zip entry: {info.filename}", path=info.filename),
                write_error=WriteError(f"Failed to write the file: {dest}", path=dest),
                read_exceptions=_MEMBER_READ_EXCEPTIONS,
            )

    logger.debug("extracted %s (%d bytes)", dest, n)
    return dest


def unbundle(
    file_path: str | Path,
    output_folder_path: str | Path,
    *,
    safe_paths: bool = False,
) -> list[Path]:
    """Extract the archive at `file_path` under `output_folder_path`.

    Pre-existing files at the same destinations are overwritten.

    Returns:
        Paths created (directories and files) in archive order.

    Raises:
        OpenError: the archive or a destination file cannot be opened/created.
        FormatError: the archive is not a valid ZIP container.
        UnsafePathError: `safe_paths` is set and an entry escapes the root.
        ReadError: an entry cannot be read/decompressed.
        DirectoryError: a destination directory cannot be created.
        WriteError: an extracted file cannot be written.
    """
    src = Path(file_path)
    root = Path(output_folder_path)

    try:
        archive = zipfile.ZipFile(src, "r")
    except zipfile.BadZipFile as e:
        raise FormatError(f"Invalid zip archive: {e}", path=src) from e
    except OSError as e:
        raise OpenError(f"Failed to open the file: {src}", path=src) from e

    written: list[Path] = []
    with archive:
        for info in archive.infolist():
            if safe_paths:
                check_member_path(info.filename)
            written.append(_extract_member(archive, info, root))

    logger.info("unbundled %d entries from %s into %s", len(written), src, root)
    return written
