"""
Domain interfaces (Ports) for request admission.

These abstract base classes define the contracts that implementations must satisfy.
They have no external dependencies and represent the core domain boundaries.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from accessguard.domain.models import AccessResult, Request


class StatusSinkInterface(ABC):
    """
    Port for human-readable status emission.

    Every validation link and processing layer reports what it did by
    emitting exactly one line per visit to a sink.
    """

    @abstractmethod
    def emit(self, line: str) -> None:
        """
        Emit a single status line.

        Args:
            line: Human-readable status text (no trailing newline)
        """
        pass


class ValidationLinkInterface(ABC):
    """
    Port for one stage of the validation chain.

    A link either rejects and halts, or approves and forwards to its
    successor. A link without a successor grants access.
    """

    @abstractmethod
    def handle(self, request: "Request") -> "AccessResult":
        """
        Run this link and every link after it.

        Args:
            request: The request under validation

        Returns:
            AccessResult with the terminal verdict of the chain
        """
        pass

    @abstractmethod
    def set_next(self, link: "ValidationLinkInterface") -> "ValidationLinkInterface":
        """
        Wire the successor link.

        Args:
            link: The link that runs after this one approves

        Returns:
            The successor, so wiring calls can be chained in order

        Raises:
            ChainWiringError: If the wiring is rejected
        """
        pass


class ProcessingOperationInterface(ABC):
    """
    Port for processing a request's identity.

    Decorators implement this same port and wrap exactly one inner
    operation, so any depth of nesting is itself an operation.
    """

    @abstractmethod
    def process(self) -> None:
        """Perform this layer's side effect, then delegate inward (if wrapped)."""
        pass
