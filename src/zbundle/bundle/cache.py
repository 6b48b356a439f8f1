"""Content-addressed import: unbundle an archive into `<cache_root>/<sha256>/`.

Two imports of byte-identical archives land in the same directory; the second
one overwrites the first file by file (the unbundler's normal overwrite rule).
"""

from __future__ import annotations

import logging
from pathlib import Path

from .hashing import hash_file
from .reader import unbundle

logger = logging.getLogger(__name__)


def cache_dir_for(file_path: str | Path, cache_root: str | Path) -> Path:
    return Path(cache_root) / hash_file(file_path)


def unbundle_cached(file_path: str | Path, cache_root: str | Path, *, safe_paths: bool = False) -> Path:
    """Unbundle `file_path` into its digest directory under `cache_root` and return it.

    The digest directory is not created for an empty archive.
    """
    target = cache_dir_for(file_path, cache_root)
    unbundle(file_path, target, safe_paths=safe_paths)
    logger.info("imported %s into %s", file_path, target)
    return target
