"""Tests for ConsoleReporter.

Tests the Rich-based console output reporter.
"""

from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from bucket_harness.errors import HarnessFailure, RemoteAccessError
from bucket_harness.reporters.base import Reporter
from bucket_harness.reporters.console import ConsoleReporter


def make_reporter(**kwargs) -> tuple[ConsoleReporter, StringIO]:
    output = StringIO()
    console = Console(file=output, force_terminal=False, width=200)
    return ConsoleReporter(console=console, **kwargs), output


class TestConsoleReporterInterface:
    """Tests that ConsoleReporter implements Reporter interface."""

    def test_inherits_from_reporter(self):
        """ConsoleReporter should inherit from Reporter."""
        assert isinstance(ConsoleReporter(), Reporter)


class TestConsoleReporterLog:
    """Tests for log method."""

    def test_log_includes_name_and_message(self):
        """Log lines carry the test name and the message."""
        reporter, output = make_reporter(name="test_bucket")

        reporter.log("Creating bucket my-bucket")

        text = output.getvalue()
        assert "test_bucket" in text
        assert "Creating bucket my-bucket" in text

    def test_log_escapes_markup(self):
        """Square brackets in messages are printed literally."""
        reporter, output = make_reporter()

        reporter.log("Labels [env] = [bold]prod")

        assert "Labels [env] = [bold]prod" in output.getvalue()

    def test_quiet_suppresses_log(self):
        """Quiet mode prints nothing for log lines."""
        reporter = ConsoleReporter(quiet=True)

        with patch.object(reporter.console, "print") as mock_print:
            reporter.log("hidden")

        mock_print.assert_not_called()


class TestConsoleReporterFail:
    """Tests for fail method."""

    def test_fail_raises_harness_failure(self):
        """fail aborts with HarnessFailure carrying the message."""
        reporter, output = make_reporter()

        with pytest.raises(HarnessFailure, match="Storage Class is STANDARD"):
            reporter.fail("Storage Class is STANDARD does not match")

        assert "[FAIL]" in output.getvalue()

    def test_fail_is_an_assertion_error(self):
        """Test runners treat the failure as an assertion failure."""
        reporter, _ = make_reporter()

        with pytest.raises(AssertionError):
            reporter.fail("boom")

    def test_fail_chains_exceptions(self):
        """An exception reason is kept as the cause."""
        reporter, _ = make_reporter()
        error = RemoteAccessError("denied")

        with pytest.raises(HarnessFailure) as exc_info:
            reporter.fail(error)

        assert exc_info.value.__cause__ is error
        assert str(exc_info.value) == "denied"

    def test_fail_prints_even_when_quiet(self):
        reporter, output = make_reporter(quiet=True)

        with pytest.raises(HarnessFailure):
            reporter.fail("still shown")

        assert "still shown" in output.getvalue()
