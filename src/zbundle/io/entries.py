"""Entry-list JSON I/O.

Schema (a JSON array, one object per archive entry, in archive order):

  [
    {"file_content": {"type": "Data", "value": "hello"}, "bundled_path": "a.txt"},
    {"file_content": {"type": "Path", "value": "/tmp/x.bin"}, "bundled_path": "dir/b.bin"}
  ]

Rules:
- This reader is *validation-only*: bundled paths and text payloads are kept
  byte-for-byte (no stripping); order is preserved; duplicates are kept.
- `type` is exactly "Data" (inline UTF-8 text) or "Path" (file reference).
- Relative "Path" values resolve against `base_dir` when one is given;
  `read_entries_json()` passes the JSON file's own directory.
- Writer is stable: UTF-8, `indent=2`, newline-terminated.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from zbundle.core.model import BundleEntry, FileReference, InlineContent

DATA = "Data"
PATH = "Path"

_MISSING = object()


@dataclass(frozen=True)
class EntriesValidationError(ValueError):
    """Deterministic validation error for entry-list JSON."""

    message: str

    def __str__(self) -> str:
        return self.message


def _require_dict(value: Any, *, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise EntriesValidationError(f"{where}: expected JSON object, got {type(value).__name__}")
    return value


def _require_str(value: Any, *, where: str) -> str:
    if not isinstance(value, str):
        raise EntriesValidationError(f"{where}: expected str, got {type(value).__name__}")
    return value


def _require_key(obj: dict[str, Any], key: str, *, where: str) -> Any:
    v = obj.get(key, _MISSING)
    if v is _MISSING:
        raise EntriesValidationError(f"{where}: missing required key '{key}'")
    if v is None:
        raise EntriesValidationError(f"{where}.{key}: must not be null")
    return v


def _content_from_obj(obj: Any, *, where: str, base_dir: Optional[Path]) -> InlineContent | FileReference:
    content = _require_dict(obj, where=where)
    kind = _require_str(_require_key(content, "type", where=where), where=f"{where}.type")
    value = _require_str(_require_key(content, "value", where=where), where=f"{where}.value")

    if kind == DATA:
        return InlineContent(value)
    if kind == PATH:
        if not value:
            raise EntriesValidationError(f"{where}.value: must be a non-empty path")
        p = Path(value)
        if base_dir is not None and not p.is_absolute():
            p = base_dir / p
        return FileReference(p)
    raise EntriesValidationError(f"{where}.type: expected '{DATA}' or '{PATH}', got {kind!r}")


def entries_from_json_obj(obj: Any, *, base_dir: Optional[str | Path] = None) -> list[BundleEntry]:
    """Validate a decoded entry-list JSON value and return `BundleEntry` objects."""
    if not isinstance(obj, list):
        raise EntriesValidationError(f"entries: expected JSON array, got {type(obj).__name__}")
    base = Path(base_dir) if base_dir is not None else None

    out: list[BundleEntry] = []
    for i, item in enumerate(obj):
        where = f"entries[{i}]"
        d = _require_dict(item, where=where)
        content = _content_from_obj(
            _require_key(d, "file_content", where=where),
            where=f"{where}.file_content",
            base_dir=base,
        )
        bundled_path = _require_str(_require_key(d, "bundled_path", where=where), where=f"{where}.bundled_path")
        if not bundled_path:
            raise EntriesValidationError(f"{where}.bundled_path: must be a non-empty string")
        out.append(BundleEntry(content, bundled_path))
    return out


def read_entries_json(path: str | Path) -> list[BundleEntry]:
    """Read an entry-list JSON file.

    Raises:
        EntriesValidationError: malformed JSON or a schema violation.
        OSError: the file cannot be read.
    """
    p = Path(path)
    try:
        obj = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise EntriesValidationError(f"{p}: invalid JSON ({e.msg} at line {e.lineno} column {e.colno})") from e
    return entries_from_json_obj(obj, base_dir=p.parent)


def entries_to_json_obj(entries: Iterable[BundleEntry]) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for entry in entries:
        content = entry.content
        if isinstance(content, InlineContent):
            file_content = {"type": DATA, "value": content.text}
        else:
            file_content = {"type": PATH, "value": str(content.path)}
        out.append({"file_content": file_content, "bundled_path": entry.bundled_path})
    return out


def write_entries_json(path: str | Path, entries: Iterable[BundleEntry]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(entries_to_json_obj(entries), indent=2, ensure_ascii=False) + "\n"
    p.write_text(text, encoding="utf-8")
