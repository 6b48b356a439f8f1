"""Quickcheck workspace: bundle -> unbundle -> compare.

This workspace is self-contained (no repo-level assets required). It writes a
small binary fixture, bundles it together with an inline text entry and a
directory marker under
`workspaces/00_quickcheck_bundle_roundtrip/outputs/`, unbundles the archive,
and writes a JSON report comparing every extracted file with its source.
"""

from __future__ import annotations

import json
import zipfile
from pathlib import Path
from typing import Any

from zbundle.bundle import bundle, hash_file, unbundle
from zbundle.core.model import BundleEntry, InlineContent, file_entry, inline_entry


def _expected_bytes(entry: BundleEntry) -> bytes:
    if isinstance(entry.content, InlineContent):
        return entry.content.encode()
    return entry.content.path.read_bytes()


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def main() -> None:
    here = Path(__file__).resolve().parent
    outputs = here / "outputs"
    outputs.mkdir(parents=True, exist_ok=True)

    fixture = outputs / "fixtures" / "x.bin"
    fixture.parent.mkdir(parents=True, exist_ok=True)
    fixture.write_bytes(bytes([0, 1, 2, 3]))

    entries = [
        inline_entry("hello", "a.txt"),
        file_entry(fixture, "dir/b.bin"),
        inline_entry("", "empty-folder/"),
    ]

    archive = bundle(entries, outputs / "out.zip")
    extracted = outputs / "extracted"
    unbundle(archive, extracted)

    with zipfile.ZipFile(archive) as zf:
        layout = [
            {"name": i.filename, "compress_type": i.compress_type, "file_size": i.file_size}
            for i in zf.infolist()
        ]

    checks: list[dict[str, Any]] = []
    for entry in entries:
        dest = extracted / entry.bundled_path
        if entry.is_directory:
            ok = dest.is_dir() and not any(dest.iterdir())
        else:
            ok = dest.is_file() and dest.read_bytes() == _expected_bytes(entry)
        checks.append({"bundled_path": entry.bundled_path, "ok": bool(ok)})

    report = {
        "archive": str(archive),
        "archive_sha256": hash_file(archive),
        "layout": layout,
        "checks": checks,
        "all_ok": all(c["ok"] for c in checks),
    }
    _write_json(outputs / "report.json", report)
    print(json.dumps(report, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
