"""
Permission check.

The permission flag is supplied by the caller; this link only reads it.
"""

from accessguard.checks.base import AccessCheck
from accessguard.domain.models import RejectionReason, Request


class PermissionCheck(AccessCheck):
    """Rejects requests whose permission flag is not set."""

    name = "permission"

    def evaluate(self, request: Request) -> RejectionReason | None:
        if not request.permitted:
            return RejectionReason.INSUFFICIENT_PERMISSION
        return None
