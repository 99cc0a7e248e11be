"""
Logging status sink.

Bridges status lines into the standard logging system.
"""

import logging

from accessguard.domain.interfaces import StatusSinkInterface

_DEFAULT_LOGGER = "accessguard.status"


class LoggingStatusSink(StatusSinkInterface):
    """Forwards each status line to a logger at a fixed level."""

    def __init__(
        self, logger: logging.Logger | None = None, level: int = logging.INFO
    ) -> None:
        """
        Args:
            logger: Target logger (default: the ``accessguard.status`` logger)
            level: Log level used for every line
        """
        self._logger = logger or logging.getLogger(_DEFAULT_LOGGER)
        self._level = level

    def emit(self, line: str) -> None:
        self._logger.log(self._level, "%s", line)
