"""Define utility functions to simplify logging to the CLI."""

from __future__ import annotations

import logging
from typing import Protocol

from rich.console import Console

logger = logging.getLogger(__name__)
console = Console()


def log_info(message: str) -> None:
    """Log the given string at the info level."""
    logger.info(message)


def log_warning(message: str) -> None:
    """Log the given string at the warning level."""
    logger.warning(message)


class DiagnosticSink(Protocol):
    """A destination for diagnostics emitted while planning (e.g., while fixing input states)."""

    def message(self, text: str) -> None:
        """Report an informational message."""

    def warn(self, text: str) -> None:
        """Report a warning."""


class LoggingDiagnostics:
    """Forwards diagnostics to the package logger."""

    def message(self, text: str) -> None:
        """Report an informational message."""
        log_info(text)

    def warn(self, text: str) -> None:
        """Report a warning."""
        log_warning(text)
