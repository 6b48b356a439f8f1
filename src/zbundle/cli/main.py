"""zbundle CLI entrypoint.

Thin command-dispatch layer over `zbundle.bundle`: every command calls one
engine operation, prints its result on stdout and maps failures to exit codes.
"""

from __future__ import annotations

import logging
import sys

import typer

app = typer.Typer(
    name="zbundle",
    add_completion=False,
    no_args_is_help=True,
    help="Pack files and inline text into ZIP bundles, and unpack them again.",
)


@app.callback()
def _callback(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging on stderr."),
) -> None:
    """zbundle CLI."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(levelname)s: %(message)s",
            stream=sys.stderr,
        )


@app.command("version")
def version() -> None:
    """Print the installed zbundle version."""
    from zbundle import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `zbundle --help` is fast.
    """
    from zbundle.cli.commands import bundle as bundle_cmd
    from zbundle.cli.commands import hash_file as hash_file_cmd
    from zbundle.cli.commands import import_bundle as import_bundle_cmd
    from zbundle.cli.commands import unbundle as unbundle_cmd

    bundle_cmd.register(app)
    unbundle_cmd.register(app)
    hash_file_cmd.register(app)
    import_bundle_cmd.register(app)


_register_commands()
