"""
Status sink implementations.

Where validation links and processing layers send their status lines.
"""

from accessguard.infrastructure.sinks.console import ConsoleStatusSink
from accessguard.infrastructure.sinks.logs import LoggingStatusSink
from accessguard.infrastructure.sinks.memory import InMemoryStatusSink

__all__ = [
    "ConsoleStatusSink",
    "LoggingStatusSink",
    "InMemoryStatusSink",
]
