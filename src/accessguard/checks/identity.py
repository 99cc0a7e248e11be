"""
Identity-presence check.

Pure link with no I/O beyond its status line.
"""

from accessguard.checks.base import AccessCheck
from accessguard.domain.models import RejectionReason, Request


class IdentityCheck(AccessCheck):
    """
    Rejects requests that carry no identity.

    An absent (None) and an empty identity are treated the same way.
    """

    name = "login"

    def evaluate(self, request: Request) -> RejectionReason | None:
        if not request.has_identity:
            return RejectionReason.MISSING_IDENTITY
        return None
