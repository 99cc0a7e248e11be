"""
Base validation link and chain composition.

AccessCheck implements the chain-of-responsibility link: each link either
rejects and halts, or approves and forwards to its successor. The last link
in a chain grants access.
"""

import logging
from abc import abstractmethod

from accessguard.domain.exceptions import ChainWiringError
from accessguard.domain.interfaces import StatusSinkInterface, ValidationLinkInterface
from accessguard.domain.models import AccessResult, RejectionReason, Request
from accessguard.infrastructure.sinks import ConsoleStatusSink

logger = logging.getLogger(__name__)


class AccessCheck(ValidationLinkInterface):
    """
    One link of a validation chain.

    Subclasses implement ``evaluate()``; the link handles emission,
    forwarding and the terminal grant. Every visited link emits exactly one
    line (approval or rejection), and a chain that runs to completion emits
    one final grant line.

    Wiring is set once via ``set_next()`` and is frozen as soon as the link
    handles its first request.
    """

    name: str = "check"

    def __init__(
        self,
        sink: StatusSinkInterface | None = None,
        name: str | None = None,
    ):
        """
        Args:
            sink: Where status lines go (default: ConsoleStatusSink)
            name: Override for the link name used in status lines and trails
        """
        self._sink = sink if sink is not None else ConsoleStatusSink()
        if name is not None:
            self.name = name
        self._next: ValidationLinkInterface | None = None
        self._started = False

    @property
    def next(self) -> ValidationLinkInterface | None:
        """The successor link, or None for the last link."""
        return self._next

    @property
    def approval_line(self) -> str:
        return f"{self.name} ok"

    def set_next(self, link: ValidationLinkInterface) -> ValidationLinkInterface:
        if self._started:
            raise ChainWiringError(
                f"Cannot rewire '{self.name}' after it has handled a request",
                self,
                link,
            )
        if self._next is not None:
            raise ChainWiringError(
                f"'{self.name}' already has a successor", self, link
            )
        if self._reaches(link):
            raise ChainWiringError(
                f"Wiring '{self.name}' to {type(link).__name__} would form a cycle",
                self,
                link,
            )
        self._next = link
        logger.debug("Wired %s -> %s", self.name, getattr(link, "name", link))
        return link

    def handle(self, request: Request) -> AccessResult:
        self._started = True
        reason = self.evaluate(request)
        if reason is not None:
            return self._reject(AccessResult.reject(request, reason))

        self._sink.emit(self.approval_line)
        return self._proceed(request).visited(self.name)

    @abstractmethod
    def evaluate(self, request: Request) -> RejectionReason | None:
        """
        Decide whether this link rejects the request.

        Returns:
            The rejection reason, or None to approve and forward
        """
        pass

    def _proceed(self, request: Request) -> AccessResult:
        """Hand the request to the successor, or grant when there is none."""
        if self._next is not None:
            return self._next.handle(request)
        return self._grant(request)

    def _grant(self, request: Request) -> AccessResult:
        self._sink.emit(f"granted: {request.identity}")
        return AccessResult.grant(request)

    def _reject(self, result: AccessResult) -> AccessResult:
        self._sink.emit(f"rejected: {result.feedback}")
        return result.visited(self.name)

    def _reaches(self, link: ValidationLinkInterface) -> bool:
        """True if following successors from *link* arrives back at this link."""
        seen: set[int] = set()
        current: ValidationLinkInterface | None = link
        while current is not None and id(current) not in seen:
            if current is self:
                return True
            seen.add(id(current))
            current = getattr(current, "next", None)
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def build_chain(*links: ValidationLinkInterface) -> ValidationLinkInterface:
    """
    Wire links in the order given and return the head.

    Args:
        *links: Links to wire (first runs first)

    Returns:
        The first link, the single entry point of the chain

    Raises:
        ValueError: If no links are given
        ChainWiringError: If any link refuses its successor
    """
    if not links:
        raise ValueError("A validation chain needs at least one link")
    for current, successor in zip(links, links[1:]):
        current.set_next(successor)
    return links[0]


def describe_chain(head: ValidationLinkInterface) -> str:
    """Render the wiring order, e.g. ``login -> permission``."""
    names = []
    seen: set[int] = set()
    current: ValidationLinkInterface | None = head
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        names.append(getattr(current, "name", type(current).__name__))
        current = getattr(current, "next", None)
    return " -> ".join(names)
