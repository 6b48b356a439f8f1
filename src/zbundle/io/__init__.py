"""zbundle I/O helpers.

Entry-list JSON loading/saving in [`entries.py`](entries.py:1).
"""

from __future__ import annotations

from .entries import EntriesValidationError, entries_from_json_obj, read_entries_json, write_entries_json

__all__ = [
    "EntriesValidationError",
    "entries_from_json_obj",
    "read_entries_json",
    "write_entries_json",
]
