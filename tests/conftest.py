"""
Pytest fixtures for progression-api tests.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from backend.main import create_app
from backend.settings import Settings
from infrastructure.static_catalog import STATIC_EXERCISES
from services.catalog_provider import CatalogProvider
from services.exercise_catalog import ExerciseCatalog


TEST_USER_ID = "test-user-123"


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", rapidapi_key=None, _env_file=None)


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance backed by the static library."""
    return create_app(settings=test_settings, catalog_provider=CatalogProvider())


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient.
    Properly cleans up dependency overrides after each test.
    """
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("RAPIDAPI_KEY", raising=False)
    monkeypatch.delenv("SENTRY_DSN", raising=False)


# ---------------------------------------------------------------------------
# Domain Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def static_catalog() -> ExerciseCatalog:
    """Catalog over the built-in exercise library."""
    return ExerciseCatalog(STATIC_EXERCISES)
