"""Pytest configuration and shared fixtures for validaff tests."""

import pytest

from tests.helpers import Pending, Recorder


@pytest.fixture
def recorder():
    """Fresh recording completion callback."""
    return Recorder()


@pytest.fixture
def order():
    """Shared event log for ordering assertions."""
    return []


@pytest.fixture
def pending(order):
    """Externally resolved leaf sharing the order log."""
    return Pending("pending", order)
