"""zbundle core: entry descriptors and the error taxonomy.

This package is intentionally standalone and must not import CLI/bundle/io
to avoid circular dependencies.
"""

from __future__ import annotations

from .errors import (
    BundleError,
    DirectoryError,
    FormatError,
    OpenError,
    ReadError,
    UnsafePathError,
    WriteError,
)
from .model import (
    BundleEntry,
    ContentSource,
    FileReference,
    InlineContent,
    file_entry,
    inline_entry,
    is_directory_marker,
)

__all__ = [
    "BundleEntry",
    "ContentSource",
    "FileReference",
    "InlineContent",
    "file_entry",
    "inline_entry",
    "is_directory_marker",
    "BundleError",
    "OpenError",
    "ReadError",
    "WriteError",
    "FormatError",
    "DirectoryError",
    "UnsafePathError",
]
