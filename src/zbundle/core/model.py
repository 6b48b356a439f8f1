"""Entry descriptors for the bundler.

An entry pairs a content source with the path it is stored under inside the
archive. The content source is a two-case tagged variant:

- `InlineContent`: UTF-8 text written verbatim
- `FileReference`: an on-disk file whose bytes are streamed verbatim

Bundled paths are forward-slash separated and relative. They are trusted
verbatim here (no `..` / absolute-path checks); see
`zbundle.bundle.reader.unbundle(safe_paths=True)` for hardening on extraction.

This module must not import bundle/io/cli.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union


@dataclass(frozen=True)
class InlineContent:
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"InlineContent.text: expected str, got {type(self.text).__name__}")

    def encode(self) -> bytes:
        return self.text.encode("utf-8")


@dataclass(frozen=True)
class FileReference:
    path: Path

    def __post_init__(self) -> None:
        if not isinstance(self.path, (str, Path)):
            raise TypeError(f"FileReference.path: expected str or Path, got {type(self.path).__name__}")
        if not str(self.path):
            raise ValueError("FileReference.path: must be a non-empty path")
        object.__setattr__(self, "path", Path(self.path))


# Plain assignment keeps Python 3.9 compatibility (no `X | Y` at runtime).
ContentSource = Union[InlineContent, FileReference]


def is_directory_marker(bundled_path: str) -> bool:
    """Return True if `bundled_path` names a directory entry (trailing `/`)."""
    return bundled_path.endswith("/")


def _require_bundled_path(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"BundleEntry.bundled_path: expected str, got {type(value).__name__}")
    if not value:
        raise ValueError("BundleEntry.bundled_path: must be a non-empty string")
    return value


@dataclass(frozen=True)
class BundleEntry:
    """One logical unit to pack: a content source and its path inside the archive."""

    content: ContentSource
    bundled_path: str

    def __post_init__(self) -> None:
        if not isinstance(self.content, (InlineContent, FileReference)):
            raise TypeError(
                f"BundleEntry.content: expected InlineContent or FileReference, got {type(self.content).__name__}"
            )
        object.__setattr__(self, "bundled_path", _require_bundled_path(self.bundled_path))

    @property
    def is_directory(self) -> bool:
        return is_directory_marker(self.bundled_path)


def inline_entry(text: str, bundled_path: str) -> BundleEntry:
    return BundleEntry(InlineContent(text), bundled_path)


def file_entry(path: str | Path, bundled_path: str) -> BundleEntry:
    return BundleEntry(FileReference(Path(path)), bundled_path)
