"""Tests for PytestReporter."""

from io import StringIO

import pytest
from rich.console import Console

from bucket_harness.reporters import ConsoleReporter, PytestReporter


class TestPytestReporter:
    """Tests for PytestReporter."""

    def test_is_console_reporter(self):
        assert isinstance(PytestReporter(), ConsoleReporter)

    def test_fail_uses_pytest_fail(self):
        """fail raises pytest's Failed outcome with the message."""
        console = Console(file=StringIO())
        reporter = PytestReporter(name="test_x", console=console)

        with pytest.raises(pytest.fail.Exception, match="label env"):
            reporter.fail("Expected value for label env is prod but the value is dev")

        assert "label env" in console.file.getvalue()
