"""Shared Rich display functions for run results and settings."""

from rich.table import Table

from worldreboot.core.config import RegenerationConfig
from worldreboot.core.runner import RunSummary, TargetOutcome
from worldreboot.utils.formatting import console, print_info, print_success, print_warning


def create_outcomes_table(outcomes: list[TargetOutcome]) -> Table:
    """Create a Rich table displaying per-world results.

    Args:
        outcomes: Target outcomes in processing order.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Regeneration Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("World", no_wrap=True)
    table.add_column("Folder", style="muted")

    for outcome in outcomes:
        status = "[world.ok]OK[/]" if outcome.success else "[world.fail]FAIL[/]"
        table.add_row(status, outcome.name, str(outcome.root))

    return table


def create_config_table(config: RegenerationConfig) -> Table:
    """Create a Rich table displaying the current settings."""
    table = Table(
        title="Regeneration Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")

    enabled = "[config.enabled]yes[/]" if config.enabled else "[config.disabled]no[/]"
    table.add_row("enabled", enabled)
    table.add_row("disable_after_regeneration", "yes" if config.disable_after_regeneration else "no")
    table.add_row("worlds_to_regenerate", ", ".join(config.worlds_to_regenerate) or "-")

    return table


def print_run_summary(summary: RunSummary) -> None:
    """Print a summary line for a completed run.

    Args:
        summary: The run summary to report.
    """
    total = len(summary.outcomes)
    failed = summary.failed_targets

    if not failed:
        print_success(f"All {total} world(s) regenerated successfully.")
    else:
        console.print(
            f"\n[success]{total - len(failed)} regenerated[/success], "
            f"[error]{len(failed)} failed[/error]: {', '.join(failed)}"
        )

    if summary.disabled:
        print_warning("Regeneration has been disabled. Re-enable with: worldreboot config enable")
    elif total:
        print_info("Regeneration stays enabled for the next run.")
