"""
Pytest configuration and fixtures.
"""

import os
import sys

# Add app directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest


@pytest.fixture
def large_result_set():
    """A result set of 1000 items, 100 pages at the default page size."""
    return list(range(1000))
