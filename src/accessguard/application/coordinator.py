"""
AccessCoordinator: Process-wide entry point for validation runs.

Stateless pass-through. The chain decides; the coordinator only starts it.
"""

import logging
import threading
from typing import ClassVar, Optional

from accessguard.domain.interfaces import ValidationLinkInterface
from accessguard.domain.models import AccessResult, Request

logger = logging.getLogger(__name__)


class AccessCoordinator:
    """
    Starts validation runs.

    Construct one directly and pass it to the code that needs it, or use
    ``get_instance()`` for the shared process-wide coordinator. The shared
    instance is created lazily under a lock, so concurrent first calls
    still produce exactly one instance. It is never destroyed.

    The coordinator holds no per-request state and never alters the
    chain's outcome.
    """

    _instance: ClassVar[Optional["AccessCoordinator"]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_instance(cls) -> "AccessCoordinator":
        """
        Return the shared coordinator, creating it on first call.

        Returns:
            The same AccessCoordinator for the lifetime of the process
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created shared AccessCoordinator")
        return cls._instance

    def handle_request(
        self, request: Request, chain: ValidationLinkInterface
    ) -> AccessResult:
        """
        Run *chain* for *request*.

        Args:
            request: The request to validate
            chain: Head link of the validation chain

        Returns:
            The chain's AccessResult, unchanged
        """
        result = chain.handle(request)
        logger.debug(
            "Validation for %r finished: %s (trail: %s)",
            request.identity,
            result.verdict.value,
            " -> ".join(result.trail),
        )
        return result
