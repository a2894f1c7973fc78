"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from worldreboot import __version__
from worldreboot.cli.commands import config, run
from worldreboot.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="worldreboot",
    help="Regenerate game server worlds by emptying their folders.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"worldreboot version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Show debug records (every deleted path).
        quiet: Only show errors.
    """
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every deleted path.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors.",
        ),
    ] = False,
) -> None:
    """worldreboot - Regenerate game server worlds.

    Empties the configured world folders so the server generates
    fresh worlds on its next start.
    """
    configure_logging(verbose=verbose, quiet=quiet)


# Register commands
app.add_typer(run.app, name="run")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
