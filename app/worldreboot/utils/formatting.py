"""Rich console formatting utilities.

Provides the shared consoles and the style names used for CLI output.
"""

import sys

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "muted": "#b2bec3",
        "border": "#29526d",
        "bold_header": "bold #69B9A1",
        "dim": "#b2bec3",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        # Per-world result and config state markers
        "world.ok": "bold #03b971",
        "world.fail": "bold #f53263",
        "config.enabled": "bold #03b971",
        "config.disabled": "#f5b332",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
