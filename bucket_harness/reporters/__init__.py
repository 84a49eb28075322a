"""Reporters bind the harness to the running test: logging and failing."""

from .base import Reporter
from .console import ConsoleReporter
from .pytest_reporter import PytestReporter

__all__ = ["Reporter", "ConsoleReporter", "PytestReporter"]
