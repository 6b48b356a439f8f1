from __future__ import annotations

import os
import stat
import time
import zipfile
from pathlib import Path

from conftest import write_bytes

from zbundle.bundle import bundle, hash_file
from zbundle.bundle.writer import ZIP_EPOCH
from zbundle.core.model import file_entry, inline_entry


def _set_mtime(path: Path, local: tuple[int, int, int, int, int, int]) -> None:
    ts = time.mktime(local + (0, 0, -1))
    os.utime(path, (ts, ts))


def test_file_reference_keeps_source_mtime_and_mode(tmp_path: Path) -> None:
    src = write_bytes(tmp_path / "run.sh", b"#!/bin/sh\necho hi\n")
    src.chmod(0o755)
    _set_mtime(src, (2023, 6, 15, 12, 30, 44))

    archive = tmp_path / "o.zip"
    bundle([file_entry(src, "bin/run.sh")], archive)

    with zipfile.ZipFile(archive) as zf:
        info = zf.getinfo("bin/run.sh")
    mode = info.external_attr >> 16
    assert info.date_time == (2023, 6, 15, 12, 30, 44)
    assert stat.S_ISREG(mode)
    assert stat.S_IMODE(mode) == 0o755
    assert info.compress_type == zipfile.ZIP_DEFLATED


def test_file_reference_older_than_zip_epoch_is_clamped(tmp_path: Path) -> None:
    src = write_bytes(tmp_path / "old.txt", b"old")
    os.utime(src, (86400.0, 86400.0))

    archive = tmp_path / "o.zip"
    bundle([file_entry(src, "old.txt")], archive)

    with zipfile.ZipFile(archive) as zf:
        assert zf.getinfo("old.txt").date_time == ZIP_EPOCH


def test_inline_and_folder_entries_use_fixed_metadata(tmp_path: Path) -> None:
    archive = tmp_path / "o.zip"
    bundle([inline_entry("x", "x.txt"), inline_entry("", "folder/")], archive)

    with zipfile.ZipFile(archive) as zf:
        text = zf.getinfo("x.txt")
        folder = zf.getinfo("folder/")

    assert text.date_time == ZIP_EPOCH
    assert folder.date_time == ZIP_EPOCH
    assert stat.S_ISREG(text.external_attr >> 16)
    assert stat.S_IMODE(text.external_attr >> 16) == 0o644
    assert stat.S_ISDIR(folder.external_attr >> 16)
    assert folder.external_attr & 0x10


def test_same_entries_produce_identical_archives(tmp_path: Path) -> None:
    src = write_bytes(tmp_path / "data.bin", b"\x00\x01\x02\x03" * 64)
    entries = [
        inline_entry('{"title": "demo"}', "manifest.json"),
        inline_entry("", "assets/"),
        file_entry(src, "assets/data.bin"),
    ]

    first = bundle(entries, tmp_path / "first.zip")
    time.sleep(2.1)
    second = bundle(entries, tmp_path / "second.zip")

    assert first.read_bytes() == second.read_bytes()
    assert hash_file(first) == hash_file(second)
