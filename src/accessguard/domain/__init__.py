"""
Domain layer for request admission.

Contains the core models and ports with no external dependencies.
"""

from accessguard.domain.exceptions import ChainWiringError
from accessguard.domain.interfaces import (
    ProcessingOperationInterface,
    StatusSinkInterface,
    ValidationLinkInterface,
)
from accessguard.domain.models import (
    AccessResult,
    RejectionReason,
    Request,
    Verdict,
)

__all__ = [
    # Models
    "Request",
    "AccessResult",
    "Verdict",
    "RejectionReason",
    # Interfaces
    "ValidationLinkInterface",
    "ProcessingOperationInterface",
    "StatusSinkInterface",
    # Exceptions
    "ChainWiringError",
]
