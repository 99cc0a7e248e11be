"""
Validation checks for request admission.

Checks are links of a chain: each one either rejects and halts, or approves
and forwards. The last link grants access.

- base: AccessCheck, chain building helpers
- identity/permission: the built-in checks
- function: callables as links (explicit next-step composition)
"""

from accessguard.checks.base import AccessCheck, build_chain, describe_chain
from accessguard.checks.function import FunctionCheck, NextStep, Step, deny_when
from accessguard.checks.identity import IdentityCheck
from accessguard.checks.permission import PermissionCheck

__all__ = [
    # Built-in checks
    "IdentityCheck",
    "PermissionCheck",
    # Composition
    "AccessCheck",
    "FunctionCheck",
    "NextStep",
    "Step",
    "build_chain",
    "describe_chain",
    "deny_when",
]
