"""CLI package for worldreboot.

This package contains the Typer application and all subcommands.
"""

from worldreboot.cli.main import app

__all__ = ["app"]
