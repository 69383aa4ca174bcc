"""Tests for Rich event reporters."""
from io import StringIO

import pytest
from rich.console import Console

from dlfiles.core.models import ActionStats
from dlfiles.logging.rich_logger import QuietEventReporter, RichEventReporter


def make_reporter(**kwargs) -> tuple[RichEventReporter, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    return RichEventReporter(console=console, **kwargs), buffer


class TestRichEventReporter:
    """Tests for RichEventReporter."""

    def test_create_default(self):
        """Test default creation."""
        reporter = RichEventReporter()
        assert reporter._verbose is False
        assert reporter._quiet is False
        assert reporter.console.stderr is True

    def test_debug_hidden_by_default(self):
        reporter, buffer = make_reporter()
        reporter.debug("Deleting file: a.txt")
        assert buffer.getvalue() == ""

    def test_debug_verbose(self):
        reporter, buffer = make_reporter(verbose=True)
        reporter.debug("Deleting file: a.txt")
        assert "Deleting file: a.txt" in buffer.getvalue()

    def test_info(self):
        reporter, buffer = make_reporter()
        reporter.info("Moved 3 files")
        assert "Moved 3 files" in buffer.getvalue()

    def test_quiet_suppresses_info_and_debug(self):
        reporter, buffer = make_reporter(verbose=True, quiet=True)
        reporter.info("info")
        reporter.debug("debug")
        assert buffer.getvalue() == ""

    def test_quiet_keeps_warnings_and_errors(self):
        reporter, buffer = make_reporter(quiet=True)
        reporter.warning("careful")
        reporter.error("broken")
        output = buffer.getvalue()
        assert "careful" in output
        assert "broken" in output

    def test_print_stats(self):
        reporter, buffer = make_reporter()
        reporter.print_stats(ActionStats(moved=2, deleted=1, untouched=4, errors=1))
        output = buffer.getvalue()
        assert "Moved" in output
        assert "Errors" in output
        assert "8" in output

    def test_print_stats_quiet(self):
        reporter, buffer = make_reporter(quiet=True)
        reporter.print_stats(ActionStats(moved=1))
        assert buffer.getvalue() == ""


class TestQuietEventReporter:
    """Tests for QuietEventReporter."""

    @pytest.fixture
    def reporter(self):
        return QuietEventReporter()

    def test_info_and_debug_silent(self, reporter, capsys):
        reporter.info("info")
        reporter.debug("debug")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_warning_and_error_to_stderr(self, reporter, capsys):
        reporter.warning("careful")
        reporter.error("broken")
        captured = capsys.readouterr()
        assert "WARNING: careful" in captured.err
        assert "ERROR: broken" in captured.err
