"""Map engine failures onto CLI exit codes.

- BundleError -> `error: <message>` on stderr, exit code 1
- input validation problems are raised by commands as `typer.BadParameter` (exit code 2)
"""

from __future__ import annotations

import typer

from zbundle.core.errors import BundleError


def fail(e: BundleError) -> typer.Exit:
    typer.echo(f"error: {e}", err=True)
    return typer.Exit(code=1)
