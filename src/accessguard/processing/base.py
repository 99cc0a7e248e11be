"""
Base processing operation.

The innermost layer of every decorator stack.
"""

from accessguard.domain.interfaces import ProcessingOperationInterface, StatusSinkInterface
from accessguard.infrastructure.sinks import ConsoleStatusSink


class BasicOperation(ProcessingOperationInterface):
    """Processes a request by reporting the identity it was built for."""

    def __init__(self, identity: str | None, sink: StatusSinkInterface | None = None):
        """
        Args:
            identity: The subject named in the status line
            sink: Where the status line goes (default: ConsoleStatusSink)
        """
        self._identity = identity
        self._sink = sink if sink is not None else ConsoleStatusSink()

    @property
    def identity(self) -> str | None:
        return self._identity

    def process(self) -> None:
        self._sink.emit(f"processing request for user: {self._identity}")

    def __repr__(self) -> str:
        return f"BasicOperation(identity={self._identity!r})"
