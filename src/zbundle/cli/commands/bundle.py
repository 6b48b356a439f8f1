"""`zbundle bundle` command.

Reads an entry-list JSON file (see `zbundle.io.entries`) and writes one ZIP
archive containing every entry in the listed order.
"""

from __future__ import annotations

from typing import Optional

import typer

from zbundle.bundle.writer import bundle as bundle_entries
from zbundle.cli._report import fail
from zbundle.core.errors import BundleError
from zbundle.io.entries import EntriesValidationError, read_entries_json


def register(app: typer.Typer) -> None:
    @app.command("bundle")
    def bundle(
        entries_json: str = typer.Argument(..., help="Entry-list JSON file."),
        out: str = typer.Option(..., "--out", help="Output archive path (created or overwritten)."),
        level: Optional[int] = typer.Option(None, "--level", help="Deflate compression level 0..9."),
        cleanup_on_error: bool = typer.Option(
            False,
            "--cleanup-on-error",
            help="Remove the partial archive if bundling fails.",
        ),
    ) -> None:
        """Pack the entries listed in ENTRIES_JSON into one archive."""
        if level is not None and not 0 <= level <= 9:
            raise typer.BadParameter("--level must be between 0 and 9")

        try:
            entries = read_entries_json(entries_json)
        except EntriesValidationError as e:
            raise typer.BadParameter(str(e)) from e
        except OSError as e:
            raise typer.BadParameter(f"cannot read {entries_json}: {e.strerror or e}") from e

        try:
            out_path = bundle_entries(entries, out, compresslevel=level, cleanup_on_error=cleanup_on_error)
        except BundleError as e:
            raise fail(e) from e

        typer.echo(str(out_path))
