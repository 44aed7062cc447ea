"""Log sink interface (adapter pattern)."""

from typing import Protocol

# Ordered from least to most severe
LOG_LEVELS = ("debug", "info", "warn", "error")


class ILogSink(Protocol):
    """Interface for log output."""

    def log(self, level: str, message: str) -> None:
        """Write log entry, level is one of LOG_LEVELS."""
        ...
