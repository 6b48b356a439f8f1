"""`zbundle unbundle` command."""

from __future__ import annotations

import typer

from zbundle.bundle.reader import unbundle as unbundle_archive
from zbundle.cli._report import fail
from zbundle.core.errors import BundleError


def register(app: typer.Typer) -> None:
    @app.command("unbundle")
    def unbundle(
        archive: str = typer.Argument(..., help="Path to a ZIP archive."),
        out_dir: str = typer.Option(..., "--out-dir", help="Destination root directory."),
        safe_paths: bool = typer.Option(
            False,
            "--safe-paths",
            help="Reject absolute entry names and '..' segments instead of writing outside --out-dir.",
        ),
    ) -> None:
        """Extract every entry of ARCHIVE under --out-dir."""
        try:
            written = unbundle_archive(archive, out_dir, safe_paths=safe_paths)
        except BundleError as e:
            raise fail(e) from e

        for p in written:
            typer.echo(str(p))
