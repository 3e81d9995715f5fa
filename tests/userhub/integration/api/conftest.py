"""Pytest fixtures for API tests.

Every test gets its own application and its own in-memory repository,
so tests never see each other's users.
"""

import pytest
from fastapi.testclient import TestClient

from userhub.infrastructure.persistence.memory import InMemoryUserRepository
from userhub.presentation.api.app import create_app
from userhub_config.settings import Settings


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        api_host="127.0.0.1",
        api_port=3000,
        api_debug=True,
        api_cors_origins="http://localhost:5173",
        log_level="DEBUG",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def test_client(api_settings, user_repository):
    """Create a test client around a freshly built application."""
    app = create_app(settings=api_settings, user_repository=user_repository)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def create_user(test_client):
    """Create a user through the API and return its id."""

    def _create(username: str = "mario") -> int:
        response = test_client.post("/users", json={"username": username})
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create
