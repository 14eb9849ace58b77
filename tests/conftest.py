"""Global pytest configuration."""

from __future__ import annotations

import pytest

from algochecker.logging import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()
