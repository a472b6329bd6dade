"""
Pytest configuration and fixtures for Pib Journal tests.

The API is exercised against an in-memory blob store; no test talks to
the real storage service.
"""
import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Add app to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import Settings
from app.main import create_app
from tests.fixtures.blob_store import FakeBlobStore
from tests.fixtures.credentials import ADMIN_PASSWORD, ADMIN_USERNAME, JWT_SECRET


# ============================================
# Test Fixtures
# ============================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings with known credentials and secret."""
    return Settings(
        ADMIN_USERNAME=ADMIN_USERNAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        JWT_SECRET_KEY=JWT_SECRET,
        JWT_ACCESS_EXPIRE_MINUTES=720,
        STORAGE_BACKEND="remote",
        STORAGE_INDEX_REF=None,
        SERIALIZE_INDEX_WRITES=True,
        CORS_ORIGIN="*",
        DEBUG=False,
    )


@pytest.fixture
def blob_store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture
def test_app(test_settings: Settings, blob_store: FakeBlobStore):
    """Application wired to the in-memory blob store."""
    return create_app(settings=test_settings, blob_store=blob_store)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Create a test client for the application.
    """
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    """Authorization header carrying a freshly issued token."""
    response = client.post(
        "/api/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


# ============================================
# Pytest Configuration
# ============================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "fast: Fast unit tests (no I/O beyond tmp_path)"
    )
    config.addinivalue_line(
        "markers", "integration: API tests through the FastAPI test client"
    )
