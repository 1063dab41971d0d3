"""Shared fixtures for the link cleaner tests."""

import pytest

from config import TestConfig
from linkcleaner import create_app


@pytest.fixture
def app():
    """Flask app built from the test configuration."""
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    """Test client for the Flask app."""
    return app.test_client()
