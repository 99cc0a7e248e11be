#!/usr/bin/env python3
"""
Basic AccessGuard example.

Runs one request through both compositions:

- a processing stack: time and IP decorators around the base operation
- a validation chain: login -> permission, started through the coordinator

Run with: python examples/basic_admission.py
"""

from accessguard import (
    AccessCoordinator,
    BasicOperation,
    IdentityCheck,
    IPLoggingDecorator,
    PermissionCheck,
    Request,
    TimeLoggingDecorator,
)


def main() -> None:
    """Process and validate a few sample requests."""

    requests = [
        Request(identity="admin", permitted=True),
        Request(identity="", permitted=True),
        Request(identity="bob", permitted=False),
    ]

    for request in requests:
        print(f"\n=== {request} ===")

        # Decorators run outermost first; the base operation runs last
        operation = TimeLoggingDecorator(
            IPLoggingDecorator(BasicOperation(request.identity))
        )
        operation.process()

        # Wiring order is execution order
        login = IdentityCheck()
        login.set_next(PermissionCheck())

        result = AccessCoordinator.get_instance().handle_request(request, login)
        print(f"Verdict: {result.verdict.value} (trail: {' -> '.join(result.trail)})")


if __name__ == "__main__":
    main()
