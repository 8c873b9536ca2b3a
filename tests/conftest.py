"""Shared pytest configuration for the ZipperTree test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from zippertree import Cursor


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large-tree tests excluded by run_tests.py")


@pytest.fixture
def cursor():
    """Cursor on a root holding -1."""
    return Cursor(-1)


@pytest.fixture
def fan_cursor():
    """Cursor on a root with three leaf branches 'a', 'b', 'c'."""
    c = Cursor("root")
    for value in ("a", "b", "c"):
        c.create_branch(value)
        c.step_back()
    return c
