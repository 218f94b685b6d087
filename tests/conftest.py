"""Pytest configuration and fixtures."""

import pytest

from hashviz import create_store, seed_everything


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment with fixed seed."""
    seed_everything(42)
    yield


@pytest.fixture
def linear_store():
    """Empty linear-probing store of size 7 (division hash)."""
    return create_store(7, "linear")


@pytest.fixture
def chaining_store():
    """Empty chaining store of size 5 (division hash)."""
    return create_store(5, "chaining")
