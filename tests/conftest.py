# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - clean_env      → autouse; clears ZEROBUFFER_* variables and the
#                    cached config so every test starts from defaults
# - app_config     → default AppConfig
# - zero_buffer    → freshly allocated 4096-byte buffer
# ==============================================

import os
import logging

import pytest

from zerobuffer.buffer import allocate
from zerobuffer.config import AppConfig, reset_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start each test with no ZEROBUFFER_* variables and no cached config."""
    for name in list(os.environ):
        if name.startswith("ZEROBUFFER_"):
            monkeypatch.delenv(name, raising=False)
    # Keep a developer's local .env out of the tests
    monkeypatch.setattr("zerobuffer.config.load_dotenv", lambda **kwargs: False)
    reset_config()
    yield
    reset_config()
    package_logger = logging.getLogger("zerobuffer")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def app_config():
    """Default configuration."""
    return AppConfig()


@pytest.fixture
def zero_buffer():
    """A freshly allocated 4096-byte buffer."""
    return allocate(4096)
