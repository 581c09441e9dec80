"""
Pytest configuration and shared fixtures for signer service tests.

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

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fastapi.testclient import TestClient

from api.app import create_app
from core.config import ServiceConfig
from core.crypto import encode_base58, encode_hex, generate_keypair


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def app():
    """Provide an application built from default (env-free) config."""
    return create_app(ServiceConfig())


@pytest.fixture
def client(app):
    """Provide a TestClient for the API."""
    return TestClient(app)


@pytest.fixture
def keypair():
    """Provide a fresh raw KeyPair."""
    return generate_keypair()


@pytest.fixture
def encoded_keypair(keypair):
    """Provide (public_key_base58, secret_key_hex) for a fresh key pair."""
    return encode_base58(keypair.public_key), encode_hex(keypair.secret_key)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove service environment variables for config tests."""
    for name in (
        "SIGNER_HOST",
        "SIGNER_PORT",
        "PORT",
        "SIGNER_LOG_LEVEL",
        "SIGNER_LOG_FILE",
        "SIGNER_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
