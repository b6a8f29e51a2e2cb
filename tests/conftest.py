"""Shared pytest configuration and fixtures for MenuTreeLib tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from menutreelib.testing import build_full_menu, build_sample_menu


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees, excluded by run_tests.py by default")


@pytest.fixture
def sample_menu():
    """(root, nodes-by-name) for the small reference menu."""
    return build_sample_menu()


@pytest.fixture
def full_menu():
    """Three-restaurant menu with a nested dessert menu."""
    return build_full_menu()
