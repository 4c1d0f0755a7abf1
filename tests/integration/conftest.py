"""
Integration test configuration
"""
import pytest
from fastapi.testclient import TestClient

from photothing.api.deps import get_emailer, get_storage
from photothing.app.main import app
from photothing.db.base import get_db
from photothing.services.messaging.emailer import LogOnlyEmailer


@pytest.fixture
def emailer():
    return LogOnlyEmailer()


@pytest.fixture
def client(db_session, storage, emailer):
    """FastAPI test client with dependency overrides."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_emailer] = lambda: emailer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Log a user in and return bearer auth headers."""

    def _login(email, password):
        response = client.post("/api/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
