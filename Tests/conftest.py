"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Shared helpers such as textual_test_utils live beside this file
TESTS_DIR = Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from kinetic_text import config
from kinetic_text.Motion.reduced_motion import REDUCE_MOTION_ENV


# ========== Configuration Fixtures ==========

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config layer at a throwaway file and clear its cache."""
    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv(config.CONFIG_PATH_ENV, str(config_path))
    monkeypatch.delenv(REDUCE_MOTION_ENV, raising=False)
    monkeypatch.setattr(config, "_CONFIG_CACHE", None)
    yield config_path


@pytest.fixture
def write_config(isolated_config):
    """Write TOML text to the isolated config file and drop the cache."""
    def _write(content: str) -> Path:
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        isolated_config.write_text(content, encoding="utf-8")
        config._CONFIG_CACHE = None
        return isolated_config
    return _write


# ========== Determinism ==========

@pytest.fixture
def seed():
    """Fixed seed for effects that draw random glyphs."""
    return 1234

