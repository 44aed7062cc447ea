"""Stream logging adapter."""

import sys
from datetime import datetime
from typing import Optional, TextIO

from .. import config
from ..errors import InvalidArgumentError
from ..interfaces import LOG_LEVELS


class StreamLogAdapter:
    """Adapter for logging to stdout or another text stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        min_level: str = config.LOG_LEVEL
    ):
        if min_level.lower() not in LOG_LEVELS:
            raise InvalidArgumentError(f"Unknown log level: {min_level!r}")
        self.stream = stream
        self.min_level = min_level.lower()

    def _enabled(self, level: str) -> bool:
        """Unknown levels are always written."""
        level = level.lower()
        if level not in LOG_LEVELS:
            return True
        return LOG_LEVELS.index(level) >= LOG_LEVELS.index(self.min_level)

    def log(self, level: str, message: str) -> None:
        """Write log entry to the stream."""
        if not self._enabled(level):
            return

        timestamp = datetime.now().isoformat()
        print(
            f"[{timestamp}] {level.upper()}: {message}",
            file=self.stream or sys.stdout
        )
