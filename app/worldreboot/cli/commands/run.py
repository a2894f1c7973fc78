"""Run command for regenerating worlds.

This module provides the `worldreboot run` command, meant to be called
by the server's start script before the server itself is launched.
"""

from pathlib import Path
from typing import Annotated

import typer

from worldreboot.cli.display import create_outcomes_table, print_run_summary
from worldreboot.core.config import ConfigError
from worldreboot.core.runner import regenerate
from worldreboot.utils.formatting import console, print_error, print_info

app = typer.Typer(
    name="run",
    help="Empty the configured world folders.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def run(
    ctx: typer.Context,
    base_dir: Annotated[
        Path,
        typer.Option(
            "--base-dir",
            "-b",
            help="World container directory the world names resolve against.",
        ),
    ],
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: ~/.config/worldreboot/config.toml).",
        ),
    ] = None,
) -> None:
    """Regenerate worlds if enabled in the config.

    Each configured world folder under the base directory is emptied,
    the folder itself is kept. With disable_after_regeneration set, the
    config is switched off afterwards so the next start is a no-op.

    Examples:
        worldreboot run --base-dir /srv/minecraft
        worldreboot -v run -b /srv/minecraft -c ./worldreboot.toml
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        summary = regenerate(base_dir.resolve(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if summary.skipped:
        print_info("Regeneration is disabled. Enable it with: worldreboot config enable")
        return

    console.print(create_outcomes_table(summary.outcomes))
    print_run_summary(summary)

    if not summary.success:
        raise typer.Exit(code=1)
