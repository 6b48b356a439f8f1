"""Bundle/unbundle error taxonomy.

Every failure surfaces as a `BundleError` subclass whose message names the
offending path or entry. Callers that only need the message can treat all of
them alike; the subclasses exist so tests and the CLI can tell them apart.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class BundleError(Exception):
    """Base class for every bundle/unbundle/hash failure."""

    def __init__(self, message: str, *, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class OpenError(BundleError):
    """A source file, destination file or archive could not be opened or created."""


class ReadError(BundleError):
    """Streaming bytes from a source file or an archive entry failed."""


class WriteError(BundleError):
    """Streaming bytes into an archive entry or an extracted file failed."""


class FormatError(BundleError):
    """The input is not a readable ZIP container."""


class DirectoryError(BundleError):
    """An ancestor directory of an extracted entry could not be created."""


class UnsafePathError(FormatError):
    """An archive member name escapes the destination root (only with path hardening on)."""
