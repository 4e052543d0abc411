"""Global pytest fixtures for civildate."""

from __future__ import annotations

import pytest

from civildate.domain.calendar import Clock
from tests.helpers.clock import fixed_now


@pytest.fixture
def fixed_clock() -> Clock:
    """A clock pinned to ``tests.helpers.clock.FIXED_NOW``."""
    return fixed_now
