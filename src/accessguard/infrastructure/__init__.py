"""
Infrastructure layer for request admission.

Contains adapters for external concerns (terminal output, logging).
"""

from accessguard.infrastructure.sinks import (
    ConsoleStatusSink,
    InMemoryStatusSink,
    LoggingStatusSink,
)

__all__ = [
    # Status sinks
    "ConsoleStatusSink",
    "LoggingStatusSink",
    "InMemoryStatusSink",
]
