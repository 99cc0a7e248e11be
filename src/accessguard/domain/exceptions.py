"""
Domain exceptions for request admission.

Validation outcomes are values (AccessResult), not exceptions. These
exceptions represent misuse of the composition API itself.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from accessguard.domain.interfaces import ValidationLinkInterface


class ChainWiringError(ValueError):
    """
    Raised when a validation link cannot accept the requested successor.

    Covers rewiring a link that already has a successor, rewiring after the
    chain has started handling requests, and wiring that would form a cycle.
    """

    def __init__(
        self,
        message: str,
        link: "ValidationLinkInterface",
        successor: "ValidationLinkInterface",
    ):
        """
        Args:
            message: Human-readable error message
            link: The link whose successor was being set
            successor: The rejected successor
        """
        super().__init__(message)
        self.link = link
        self.successor = successor
