"""Base reporter interface."""

from abc import ABC, abstractmethod
from typing import NoReturn, Union


class Reporter(ABC):
    """Abstract test-framework binding used by every harness operation."""

    @abstractmethod
    def log(self, message: str) -> None:
        """Record one line of test-run output."""
        pass

    @abstractmethod
    def fail(self, reason: Union[str, BaseException]) -> NoReturn:
        """Fail the current test. Must not return."""
        pass
