"""zbundle: pack heterogeneous entries into a ZIP bundle and unpack it again.

Entries are inline UTF-8 text or references to files on disk, each stored under
a caller-chosen path inside the archive.
"""

from __future__ import annotations

from zbundle.bundle import bundle, hash_file, unbundle, unbundle_cached
from zbundle.core import BundleEntry, BundleError, FileReference, InlineContent, file_entry, inline_entry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BundleEntry",
    "BundleError",
    "FileReference",
    "InlineContent",
    "bundle",
    "file_entry",
    "hash_file",
    "inline_entry",
    "unbundle",
    "unbundle_cached",
]
