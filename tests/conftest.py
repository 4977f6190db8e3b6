"""
Pytest configuration and shared fixtures for simplemerkle tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_payloads = _common.make_payloads
make_digests = _common.make_digests
reference_root = _common.reference_root


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def payloads():
    """Provide five distinct payloads."""
    return make_payloads(5)


@pytest.fixture
def digests():
    """Provide five distinct leaf digests (default hash)."""
    return make_digests(5)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SIMPLEMERKLE_* variables from the environment."""
    import os

    for key in list(os.environ):
        if key.startswith("SIMPLEMERKLE_"):
            monkeypatch.delenv(key, raising=False)
    yield monkeypatch


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
