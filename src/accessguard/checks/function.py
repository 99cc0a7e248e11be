"""
Function-based validation link.

Lets a plain callable act as a link by receiving the rest of the chain as
an explicit ``next_step`` argument instead of overriding ``evaluate()``.
"""

from collections.abc import Callable

from accessguard.checks.base import AccessCheck
from accessguard.domain.interfaces import StatusSinkInterface
from accessguard.domain.models import AccessResult, RejectionReason, Request

NextStep = Callable[[Request], AccessResult]
"""Runs the remainder of the chain for a request."""

Step = Callable[[Request, NextStep], AccessResult]
"""A link body: return ``next_step(request)`` to approve, or a rejection to halt."""


class FunctionCheck(AccessCheck):
    """
    Validation link backed by a callable.

    The callable decides explicitly whether the rest of the chain runs:

    - ``return next_step(request)`` approves and forwards; the approval line
      is emitted when ``next_step`` is invoked.
    - ``return AccessResult.reject(request, reason)`` halts; the link emits
      the rejection line.

    Returning a grant without calling ``next_step`` ends the chain early with
    a grant. This is the only way to express "accept but stop"; the link
    emits its approval line and the usual grant line.

    ``next_step`` may be called at most once, and a step that calls it must
    return its result unchanged; either violation raises RuntimeError, since
    the rest of the chain has already emitted its lines.
    """

    def __init__(
        self,
        step: Step,
        name: str | None = None,
        sink: StatusSinkInterface | None = None,
    ):
        """
        Args:
            step: The link body
            name: Link name (default: the callable's ``__name__``)
            sink: Where status lines go (default: ConsoleStatusSink)
        """
        super().__init__(sink=sink, name=name or getattr(step, "__name__", "check"))
        self._step = step

    def evaluate(self, request: Request) -> RejectionReason | None:
        """Not used: the callable decides inside ``handle()``."""
        return None

    def handle(self, request: Request) -> AccessResult:
        self._started = True
        forwarded: list[AccessResult] = []

        def next_step(req: Request) -> AccessResult:
            if forwarded:
                raise RuntimeError(f"'{self.name}' called next_step more than once")
            self._sink.emit(self.approval_line)
            forwarded.append(self._proceed(req))
            return forwarded[0]

        result = self._step(request, next_step)
        if forwarded:
            if result is not forwarded[0]:
                raise RuntimeError(
                    f"'{self.name}' forwarded the request but returned a different result"
                )
            return result.visited(self.name)
        if result.rejected:
            return self._reject(result)

        self._sink.emit(self.approval_line)
        return self._grant(request).visited(self.name)


def deny_when(
    predicate: Callable[[Request], bool],
    feedback: str,
) -> Step:
    """
    Build a step that rejects with ``DENIED`` when *predicate* holds.

    Example:
        blocked = FunctionCheck(deny_when(lambda r: r.identity == "root", "root is blocked"), name="blocklist")
    """

    def step(request: Request, next_step: NextStep) -> AccessResult:
        if predicate(request):
            return AccessResult.reject(request, RejectionReason.DENIED, feedback)
        return next_step(request)

    return step
