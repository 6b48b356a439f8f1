"""zbundle archive engine (ZIP container, Deflate).

- `bundle()`: pack ordered entry descriptors into one archive
- `unbundle()`: extract a whole archive under a destination root
- `hash_file()`: sha256 of a file, used to verify or key archives
- `unbundle_cached()`: extract into a digest-named cache directory
"""

from __future__ import annotations

from .cache import cache_dir_for, unbundle_cached
from .hashing import hash_file, sha256_bytes
from .reader import check_member_path, unbundle
from .writer import COMPRESSION, bundle

__all__ = [
    "COMPRESSION",
    "bundle",
    "unbundle",
    "check_member_path",
    "hash_file",
    "sha256_bytes",
    "cache_dir_for",
    "unbundle_cached",
]
