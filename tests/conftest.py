"""Shared fixtures for active-container tests."""

import pytest

from active_container.registry import registry


@pytest.fixture(autouse=True)
def isolated_registry():
    """Restores the shared registry after each test.

    Wrapper and model classes defined inside a test register themselves;
    restoring keeps them from leaking into other tests.
    """
    state = registry.snapshot()
    yield registry
    registry.restore(state)
