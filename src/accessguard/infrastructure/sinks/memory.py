"""
In-memory status sink.

Useful for testing and for embedders that inspect emitted lines.
"""

from accessguard.domain.interfaces import StatusSinkInterface


class InMemoryStatusSink(StatusSinkInterface):
    """Records every emitted line in order."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def emit(self, line: str) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> tuple[str, ...]:
        """Emitted lines, oldest first."""
        return tuple(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
