"""
Pytest configuration and fixtures for backend tests.
"""

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Set test environment variables before importing config
os.environ["ENVIRONMENT"] = "test"
os.environ["SUPPORTED_LANGUAGES"] = "en,fr"
os.environ["LANGUAGE_PARAM_NAME"] = "lang"
os.environ["CORS_ORIGINS"] = '["http://localhost:3000"]'
os.environ.pop("SENTRY_DSN", None)


@pytest.fixture
def supported_languages() -> list[str]:
    """Supported languages matching the test environment."""
    return ["en", "fr"]


@pytest.fixture(scope="function")
def client():
    """Create a test client for the application."""
    from main import app

    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
