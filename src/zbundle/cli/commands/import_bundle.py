"""`zbundle import` command.

Hashes an archive and unbundles it into `<cache-dir>/<sha256>/`, then prints
that directory. Importing the same archive twice reuses the same directory.
"""

from __future__ import annotations

import typer

from zbundle.bundle.cache import unbundle_cached
from zbundle.cli._report import fail
from zbundle.core.errors import BundleError


def register(app: typer.Typer) -> None:
    @app.command("import")
    def import_bundle(
        archive: str = typer.Argument(..., help="Path to a ZIP archive."),
        cache_dir: str = typer.Option(..., "--cache-dir", help="Cache root; the archive lands in a digest subfolder."),
        safe_paths: bool = typer.Option(False, "--safe-paths", help="Reject entry names escaping the cache folder."),
    ) -> None:
        """Unbundle ARCHIVE into a content-addressed cache folder."""
        try:
            target = unbundle_cached(archive, cache_dir, safe_paths=safe_paths)
        except BundleError as e:
            raise fail(e) from e

        typer.echo(str(target))
