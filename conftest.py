"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from french_numbers import clear_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_default_cache():
    """Start every test with an empty shared cache and zeroed hit counters."""
    clear_cache()
    yield
    clear_cache()
