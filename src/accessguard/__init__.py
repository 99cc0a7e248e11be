"""
AccessGuard: Request admission through composable checks and decorators.

Two independent compositions run over the same immutable Request:

- a validation chain, where each check either rejects and halts or approves
  and forwards, and the last check grants access;
- a processing stack, where each decorator emits its own status line and
  then delegates to the operation it wraps.

Example:
    from accessguard import (
        AccessCoordinator,
        BasicOperation,
        IdentityCheck,
        IPLoggingDecorator,
        PermissionCheck,
        Request,
        TimeLoggingDecorator,
        build_chain,
    )

    request = Request(identity="admin", permitted=True)
    TimeLoggingDecorator(IPLoggingDecorator(BasicOperation(request.identity))).process()

    chain = build_chain(IdentityCheck(), PermissionCheck())
    result = AccessCoordinator.get_instance().handle_request(request, chain)
    assert result.granted
"""

# Application layer (entry point)
from accessguard.application.coordinator import AccessCoordinator

# Validation chain
from accessguard.checks import (
    AccessCheck,
    FunctionCheck,
    IdentityCheck,
    PermissionCheck,
    build_chain,
    deny_when,
    describe_chain,
)

# Domain exceptions
from accessguard.domain.exceptions import ChainWiringError

# Domain interfaces (for type hints and custom implementations)
from accessguard.domain.interfaces import (
    ProcessingOperationInterface,
    StatusSinkInterface,
    ValidationLinkInterface,
)

# Domain models
from accessguard.domain.models import (
    AccessResult,
    RejectionReason,
    Request,
    Verdict,
)

# Infrastructure (explicit import encouraged for dependency injection)
from accessguard.infrastructure.sinks import (
    ConsoleStatusSink,
    InMemoryStatusSink,
    LoggingStatusSink,
)

# Processing decorators
from accessguard.processing import (
    BasicOperation,
    IPLoggingDecorator,
    RequestDecorator,
    TimeLoggingDecorator,
    depth,
    wrap,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Request",
    "AccessResult",
    "Verdict",
    "RejectionReason",
    # Domain interfaces
    "ValidationLinkInterface",
    "ProcessingOperationInterface",
    "StatusSinkInterface",
    # Domain exceptions
    "ChainWiringError",
    # Application layer
    "AccessCoordinator",
    # Checks
    "AccessCheck",
    "IdentityCheck",
    "PermissionCheck",
    "FunctionCheck",
    "build_chain",
    "describe_chain",
    "deny_when",
    # Processing
    "BasicOperation",
    "RequestDecorator",
    "TimeLoggingDecorator",
    "IPLoggingDecorator",
    "wrap",
    "depth",
    # Infrastructure - Status sinks
    "ConsoleStatusSink",
    "LoggingStatusSink",
    "InMemoryStatusSink",
]
