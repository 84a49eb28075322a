"""Reporter that fails the running pytest test."""

from typing import NoReturn, Union

import pytest

from bucket_harness.reporters.console import ConsoleReporter


class PytestReporter(ConsoleReporter):
    """Console reporter whose failures go through ``pytest.fail``.

    The traceback is suppressed: the harness message already names the
    bucket, the field and both values.
    """

    def fail(self, reason: Union[str, BaseException]) -> NoReturn:
        message = str(reason)
        self._print_failure(message)
        pytest.fail(message, pytrace=False)
