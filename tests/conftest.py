"""Shared pytest fixtures for accessguard tests."""

import pytest

from accessguard.checks import IdentityCheck, PermissionCheck, build_chain
from accessguard.domain.interfaces import ValidationLinkInterface
from accessguard.domain.models import Request
from accessguard.infrastructure.sinks import InMemoryStatusSink


@pytest.fixture
def sink() -> InMemoryStatusSink:
    """Create an in-memory status sink."""
    return InMemoryStatusSink()


@pytest.fixture
def admin_request() -> Request:
    """A request with identity and permission."""
    return Request(identity="admin", permitted=True)


@pytest.fixture
def anonymous_request() -> Request:
    """A request with an empty identity."""
    return Request(identity="", permitted=True)


@pytest.fixture
def unprivileged_request() -> Request:
    """A request with identity but no permission."""
    return Request(identity="bob", permitted=False)


@pytest.fixture
def login_permission_chain(sink: InMemoryStatusSink) -> ValidationLinkInterface:
    """Create the standard login -> permission chain writing to ``sink``."""
    return build_chain(IdentityCheck(sink=sink), PermissionCheck(sink=sink))
