"""Unit tests for cli/display.py.

Tests for the results and settings tables and the run summary line.
"""

import io
from pathlib import Path

import pytest
from rich.console import Console
from rich.table import Table
from worldreboot.cli import display
from worldreboot.core.config import RegenerationConfig
from worldreboot.core.runner import RunSummary, TargetOutcome
from worldreboot.utils import formatting
from worldreboot.utils.formatting import THEME


def _render(table: Table) -> str:
    buf = io.StringIO()
    Console(theme=THEME, file=buf, color_system=None, width=120).print(table)
    return buf.getvalue()


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Route the shared stdout console into a buffer."""
    buf = io.StringIO()
    test_console = Console(theme=THEME, file=buf, color_system=None, width=120)
    monkeypatch.setattr(display, "console", test_console)
    monkeypatch.setattr(formatting, "console", test_console)
    return buf


class TestTheme:
    """Tests for the project styles."""

    @pytest.mark.parametrize(
        "style",
        ["world.ok", "world.fail", "config.enabled", "config.disabled", "bold_header", "border"],
    )
    def test_style_defined(self, style: str) -> None:
        """Every style used by the tables is defined."""
        assert style in THEME.styles


class TestCreateOutcomesTable:
    """Tests for create_outcomes_table."""

    def test_columns_and_rows(self, tmp_path: Path) -> None:
        """One row per outcome with OK/FAIL status."""
        table = display.create_outcomes_table(
            [
                TargetOutcome(name="world", root=tmp_path / "world", success=True),
                TargetOutcome(name="world_nether", root=tmp_path / "world_nether", success=False),
            ]
        )

        assert [col.header for col in table.columns] == ["Status", "World", "Folder"]
        assert table.row_count == 2
        output = _render(table)
        assert "OK" in output
        assert "FAIL" in output
        assert "world_nether" in output


class TestCreateConfigTable:
    """Tests for create_config_table."""

    def test_enabled_state(self) -> None:
        """The enabled flag renders as yes/no."""
        enabled = _render(display.create_config_table(RegenerationConfig(enabled=True)))
        disabled = _render(display.create_config_table(RegenerationConfig(enabled=False)))

        assert "yes" in enabled.split("disable_after_regeneration")[0]
        assert "no" in disabled.split("disable_after_regeneration")[0]

    def test_empty_world_list(self) -> None:
        """An empty world list shows a dash."""
        output = _render(display.create_config_table(RegenerationConfig(worlds_to_regenerate=[])))
        assert "-" in output


class TestPrintRunSummary:
    """Tests for print_run_summary."""

    def test_all_succeeded(self, tmp_path: Path, captured: io.StringIO) -> None:
        """A clean run prints the success count."""
        summary = RunSummary(outcomes=[TargetOutcome("world", tmp_path / "world", True)])

        display.print_run_summary(summary)

        assert "All 1 world(s) regenerated successfully." in captured.getvalue()
        assert "stays enabled" in captured.getvalue()

    def test_failures_listed(self, tmp_path: Path, captured: io.StringIO) -> None:
        """Failed worlds are named."""
        summary = RunSummary(
            outcomes=[
                TargetOutcome("world", tmp_path / "world", True),
                TargetOutcome("world_the_end", tmp_path / "world_the_end", False),
            ],
            disabled=True,
        )

        display.print_run_summary(summary)

        output = captured.getvalue()
        assert "1 regenerated" in output
        assert "1 failed: world_the_end" in output
