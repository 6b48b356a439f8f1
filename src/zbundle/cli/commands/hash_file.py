"""`zbundle hash` command: print the hex sha256 of a file."""

from __future__ import annotations

import typer

from zbundle.bundle.hashing import hash_file as sha256_of
from zbundle.cli._report import fail
from zbundle.core.errors import BundleError


def register(app: typer.Typer) -> None:
    @app.command("hash")
    def hash_file(
        file_path: str = typer.Argument(..., help="File to hash."),
    ) -> None:
        """Print the sha256 digest of FILE_PATH."""
        try:
            digest = sha256_of(file_path)
        except BundleError as e:
            raise fail(e) from e

        typer.echo(digest)
