"""Shared fixtures and markers for romantic tests."""

import pytest

from romantic.core.numerals import Numerals


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: exhaustive sweeps over large ranges")


@pytest.fixture
def roman():
    return Numerals.default()


@pytest.fixture
def custom():
    """Two-symbol alphabet: A=1, B=5."""
    return Numerals(["A", "B"])
