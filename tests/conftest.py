"""Pytest fixtures for tickbox tests."""

import pytest

from tickbox.selector import SelectorState, initial_state

GROCERIES = ["Buy carrots", "Buy celery", "Buy kohlrabi", "Buy milk"]


@pytest.fixture(autouse=True)
def clear_caches():
    """Clear module-level caches before each test."""
    from tickbox.config import clear_config_cache

    clear_config_cache()

    yield

    clear_config_cache()


@pytest.fixture
def groceries_state() -> SelectorState:
    return initial_state(GROCERIES)
