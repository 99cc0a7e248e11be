"""Shared fixtures for architecture tests."""

import os

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Build evaluable architecture from src/accessguard."""
    src_dir = os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", "..", "src")
    )
    project_path = os.path.join(src_dir, "accessguard")
    return get_evaluable_architecture(src_dir, project_path)


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Define the layers the dependency rules apply to.

    Only domain, application and infrastructure are layered. The checks and
    processing packages are composition adapters: they build on domain ports
    and default to infrastructure sinks, so they sit outside the layer rules.
    Modules are named from the source root ('src.accessguard.domain').
    """
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.accessguard.domain"])
        .layer("application")
        .containing_modules(["src.accessguard.application"])
        .layer("infrastructure")
        .containing_modules(["src.accessguard.infrastructure"])
    )
