"""Config commands.

Provides commands to inspect and create the regeneration config, and to
switch regeneration on or off (e.g. re-enabling after a self-disable).
"""

from pathlib import Path
from typing import Annotated

import typer

from worldreboot.cli.display import create_config_table
from worldreboot.core.config import (
    ConfigError,
    ensure_config,
    get_default_config,
    save_config,
    set_enabled,
)
from worldreboot.core.paths import get_config_path
from worldreboot.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and change the regeneration config.",
    no_args_is_help=True,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Config file (default: ~/.config/worldreboot/config.toml).",
    ),
]


@app.command()
def show(config_path: ConfigOption = None) -> None:
    """Show the current settings, creating the default config if missing."""
    try:
        config = ensure_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(create_config_table(config))
    console.print(f"\n[dim]Config file: {config_path or get_config_path()}[/dim]")


@app.command()
def init(
    config_path: ConfigOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config."),
    ] = False,
) -> None:
    """Write the default config file."""
    target = config_path or get_config_path()
    if target.exists() and not force:
        print_info(f"Config already exists: {target} (use --force to overwrite)")
        return

    try:
        saved = save_config(get_default_config(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Default config written to {saved}")


@app.command()
def enable(config_path: ConfigOption = None) -> None:
    """Enable regeneration on the next run."""
    _set_enabled(True, config_path)
    print_success("Regeneration enabled.")


@app.command()
def disable(config_path: ConfigOption = None) -> None:
    """Disable regeneration."""
    _set_enabled(False, config_path)
    print_success("Regeneration disabled.")


def _set_enabled(enabled: bool, config_path: Path | None) -> None:
    """Persist the enabled flag, exiting with an error on failure."""
    try:
        set_enabled(enabled, config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
