"""Console reporter using Rich library for formatted log output.

Each log line is prefixed with a timestamp and the name of the running
test, so interleaved output from several tests stays readable.
"""

import time
from typing import NoReturn, Optional, Union

from rich.console import Console
from rich.markup import escape

from bucket_harness.errors import HarnessFailure
from bucket_harness.reporters.base import Reporter


class ConsoleReporter(Reporter):
    """Rich-based console reporter.

    Args:
        name: Name of the running test, used as the log line prefix
        console: Console to print to (a new one by default)
        quiet: If True, suppress log lines (failures are still printed)
    """

    def __init__(
        self,
        name: str = "bucket-harness",
        console: Optional[Console] = None,
        quiet: bool = False,
    ):
        # Use legacy_windows=True for ASCII-safe output on Windows consoles
        self.console = console or Console(legacy_windows=True)
        self.name = name
        self.quiet = quiet

    def _prefix(self) -> str:
        timestamp = time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())
        return f"[dim]{timestamp}[/dim] [cyan]{escape(self.name)}[/cyan]"

    def log(self, message: str) -> None:
        if self.quiet:
            return
        self.console.print(f"{self._prefix()} {escape(message)}")

    def _print_failure(self, message: str) -> None:
        self.console.print(f"{self._prefix()} [bold red][FAIL][/bold red] {escape(message)}")

    def fail(self, reason: Union[str, BaseException]) -> NoReturn:
        """Print the failure reason and raise HarnessFailure."""
        message = str(reason)
        self._print_failure(message)
        if isinstance(reason, BaseException):
            raise HarnessFailure(message) from reason
        raise HarnessFailure(message)
