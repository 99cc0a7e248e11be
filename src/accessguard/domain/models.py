"""
Domain models for request admission.

Pure data structures shared by the validation chain and the processing
decorators. All models are immutable (frozen dataclasses).
"""

from dataclasses import dataclass
from enum import Enum

# =============================================================================
# REQUEST
# =============================================================================


@dataclass(frozen=True)
class Request:
    """
    User-originated request.

    No validation happens at construction time; an absent or empty identity
    is a legal value that the validation chain is expected to reject.
    """

    identity: str | None = None
    permitted: bool = False  # Caller-supplied permission flag

    @property
    def has_identity(self) -> bool:
        return self.identity is not None and self.identity != ""


# =============================================================================
# ACCESS RESULT
# =============================================================================


class Verdict(Enum):
    """Terminal outcome of a validation run."""

    GRANTED = "granted"
    REJECTED = "rejected"


class RejectionReason(Enum):
    """Why a link halted the chain."""

    MISSING_IDENTITY = "missing identity"
    INSUFFICIENT_PERMISSION = "insufficient permission"
    DENIED = "denied"  # Caller-defined checks


@dataclass(frozen=True)
class AccessResult:
    """
    Immutable outcome of running a validation chain.

    ``trail`` names the links that were visited, in wiring order. For a
    rejection the last entry is the link that rejected.
    """

    verdict: Verdict
    identity: str | None
    reason: RejectionReason | None = None
    feedback: str = ""
    trail: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.verdict is Verdict.GRANTED and self.reason is not None:
            raise ValueError("A granted result cannot carry a rejection reason")
        if self.verdict is Verdict.REJECTED and self.reason is None:
            raise ValueError("A rejected result must carry a rejection reason")

    @classmethod
    def grant(cls, request: Request) -> "AccessResult":
        return cls(verdict=Verdict.GRANTED, identity=request.identity)

    @classmethod
    def reject(
        cls,
        request: Request,
        reason: RejectionReason,
        feedback: str = "",
    ) -> "AccessResult":
        return cls(
            verdict=Verdict.REJECTED,
            identity=request.identity,
            reason=reason,
            feedback=feedback or reason.value,
        )

    @property
    def granted(self) -> bool:
        return self.verdict is Verdict.GRANTED

    @property
    def rejected(self) -> bool:
        return self.verdict is Verdict.REJECTED

    def visited(self, name: str) -> "AccessResult":
        """Return a copy with *name* prepended to the trail."""
        return AccessResult(
            verdict=self.verdict,
            identity=self.identity,
            reason=self.reason,
            feedback=self.feedback,
            trail=(name, *self.trail),
        )
