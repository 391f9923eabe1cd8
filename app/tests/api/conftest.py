"""Fixtures for API route tests."""

import pytest

from api.dependencies.rate_limits import get_limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Rate limit counters are process-global; start every test fresh."""
    get_limiter().reset()
    yield
    get_limiter().reset()
