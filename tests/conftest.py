"""
Pytest fixtures for Portfolio API tests.
Each test gets its own application and store, so state never leaks
between tests.
"""
import pytest
from fastapi.testclient import TestClient

from portfolio_api.app.core.config import Settings
from portfolio_api.app.core.store import PortfolioStore
from portfolio_api.app.main import create_app


@pytest.fixture
def settings():
    return Settings(seed_sample_data=True, cors_origins=["*"])


@pytest.fixture
def store():
    """Store pre-loaded with the sample portfolio."""
    return PortfolioStore.seeded()


@pytest.fixture
def empty_store():
    return PortfolioStore()


@pytest.fixture
def client(settings, store):
    """TestClient over the seeded store."""
    return TestClient(create_app(settings=settings, store=store))


@pytest.fixture
def empty_client(settings, empty_store):
    """TestClient over a store with nothing in it."""
    return TestClient(create_app(settings=settings, store=empty_store))


@pytest.fixture
def project_payload():
    return {
        "title": "X",
        "description": "Y",
        "technologies": ["A", "B"],
    }
