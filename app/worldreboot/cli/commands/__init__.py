"""CLI commands for worldreboot.

This package contains all subcommand implementations.
"""

from worldreboot.cli.commands import config, run

__all__ = ["config", "run"]
