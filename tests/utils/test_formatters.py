"""Unit tests for report and summary formatters."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from deskfocus_cli.services.organization_service import MoveOutcome, OrganizeReport
from deskfocus_cli.utils.ui import formatters


@pytest.fixture()
def capture():
    """Swap the module console for one that records output."""
    con = Console(record=True, width=120, force_terminal=False, no_color=True)
    with patch.object(formatters, "console", con), patch.object(
        formatters, "err_console", con
    ):
        yield con


def _report(dry_run=False):
    return OrganizeReport(
        mode="focusmode",
        source=Path("/desk"),
        destination=Path("/home/Hidden_Shortcuts"),
        dry_run=dry_run,
        outcomes=[
            MoveOutcome(name="Steam.lnk", succeeded=True, dry_run=dry_run),
            MoveOutcome(
                name="Ghost.lnk",
                succeeded=False,
                error="shortcut 'Ghost.lnk' not found in /desk",
                error_type="NotFound",
                dry_run=dry_run,
            ),
        ],
    )


class TestFormatReport:
    def test_pretty(self, capture):
        formatters.format_report(_report())
        text = capture.export_text()
        assert "✓ Moved: Steam.lnk" in text
        assert "✗ Ghost.lnk: shortcut 'Ghost.lnk' not found" in text

    def test_pretty_dry_run(self, capture):
        formatters.format_report(_report(dry_run=True), verb="restore", past="Restored")
        text = capture.export_text()
        assert "[DRY RUN] Would restore: Steam.lnk" in text
        assert "✗ Ghost.lnk" in text

    def test_table(self, capture):
        formatters.format_report(_report(), output_format="table")
        text = capture.export_text()
        assert "Steam.lnk" in text
        assert "NotFound" in text

    def test_bracketed_names_kept_literal(self, capture):
        report = OrganizeReport(
            mode="m",
            source=Path("/desk"),
            destination=Path("/hold"),
            outcomes=[
                MoveOutcome(name="[bold]x.lnk", succeeded=True),
                MoveOutcome(
                    name="[red]y.lnk",
                    succeeded=False,
                    error="shortcut '[red]y.lnk' not found in /desk",
                    error_type="NotFound",
                ),
            ],
        )

        formatters.format_report(report)
        text = capture.export_text()

        assert "Moved: [bold]x.lnk" in text
        assert "✗ [red]y.lnk: shortcut '[red]y.lnk' not found" in text

    def test_json(self, capsys):
        formatters.format_report(_report(), output_format="json")
        data = json.loads(capsys.readouterr().out)
        assert data["success_count"] == 1
        assert data["outcomes"][1]["error_type"] == "NotFound"


class TestFormatSummary:
    def test_summary(self, capture):
        formatters.format_summary("focusmode", 3, 1, False, location="/home/Hold")
        text = capture.export_text()
        assert "--- Summary ---" in text
        assert "Mode: focusmode" in text
        assert "Successfully moved: 3" in text
        assert "Failed: 1" in text
        assert "Location: /home/Hold" in text

    def test_dry_run_summary(self, capture):
        formatters.format_summary("focusmode", 2, 0, True, location="/home/Hold")
        text = capture.export_text()
        assert "(Dry run - no files were actually moved)" in text
        assert "Failed" not in text
        assert "Location" not in text


class TestMessages:
    def test_error(self, capture):
        formatters.format_error("boom")
        assert "Error: boom" in capture.export_text()

    def test_success(self, capture):
        formatters.format_success("done")
        assert "Success: done" in capture.export_text()
