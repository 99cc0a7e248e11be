"""
Processing decorators.

RequestDecorator implements the Decorator pattern: each layer owns exactly
one inner operation, emits its own status line, then delegates inward.
Layers run outermost first and the base operation always runs last.
"""

from abc import abstractmethod
from collections.abc import Callable
from datetime import datetime

from accessguard.domain.interfaces import ProcessingOperationInterface, StatusSinkInterface
from accessguard.infrastructure.sinks import ConsoleStatusSink

DecoratorFactory = Callable[[ProcessingOperationInterface], ProcessingOperationInterface]


class RequestDecorator(ProcessingOperationInterface):
    """
    Wraps one inner operation.

    The wrapped operation is fixed at construction; layers cannot be
    re-wrapped or removed afterwards.
    """

    def __init__(
        self,
        inner: ProcessingOperationInterface,
        sink: StatusSinkInterface | None = None,
    ):
        """
        Args:
            inner: The operation this layer delegates to
            sink: Where this layer's status line goes (default: ConsoleStatusSink)
        """
        self._inner = inner
        self._sink = sink if sink is not None else ConsoleStatusSink()

    @property
    def inner(self) -> ProcessingOperationInterface:
        """Access the wrapped operation (read-only)."""
        return self._inner

    def process(self) -> None:
        self._sink.emit(self.announce())
        self._inner.process()

    @abstractmethod
    def announce(self) -> str:
        """Status line emitted by this layer before delegating."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class TimeLoggingDecorator(RequestDecorator):
    """Reports when the request is processed."""

    def __init__(
        self,
        inner: ProcessingOperationInterface,
        sink: StatusSinkInterface | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            inner: The operation this layer delegates to
            sink: Where this layer's status line goes
            clock: Source of the reported timestamp (injectable for tests)
        """
        super().__init__(inner, sink)
        self._clock = clock

    def announce(self) -> str:
        return f"request time: {self._clock().isoformat()}"


class IPLoggingDecorator(RequestDecorator):
    """Reports the client address, when one is known."""

    def __init__(
        self,
        inner: ProcessingOperationInterface,
        sink: StatusSinkInterface | None = None,
        address: str | None = None,
    ):
        super().__init__(inner, sink)
        self._address = address

    def announce(self) -> str:
        if self._address:
            return f"ip logging: {self._address}"
        return "ip logging..."


def wrap(
    operation: ProcessingOperationInterface, *decorators: DecoratorFactory
) -> ProcessingOperationInterface:
    """
    Nest decorators around *operation*.

    The first factory listed becomes the outermost layer, so
    ``wrap(base, TimeLoggingDecorator, IPLoggingDecorator)`` builds
    ``TimeLoggingDecorator(IPLoggingDecorator(base))``.

    Factories take the inner operation as their only argument; use
    ``functools.partial`` to bind a sink or other options.
    """
    for decorator in reversed(decorators):
        operation = decorator(operation)
    return operation


def depth(operation: ProcessingOperationInterface) -> int:
    """Number of decorator layers above the base operation."""
    layers = 0
    while isinstance(operation, RequestDecorator):
        layers += 1
        operation = operation.inner
    return layers
