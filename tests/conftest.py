"""
Pytest fixtures for the Workasana API.

Every test gets a fresh application bound to its own in-memory SQLite
database, plus helpers to register users and create entities over HTTP.
"""
from typing import Any, Dict, Optional

import pytest
from fastapi.testclient import TestClient

from workasana.core.config import Settings
from workasana.main import create_app

TEST_SECRET = "test-secret-key"
DEFAULT_PASSWORD = "s3cret-pass"


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", jwt_secret=TEST_SECRET, public_routes=[], debug=False)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app, client):
    session = app.state.database.session()
    yield session
    session.close()


@pytest.fixture
def register_user(client):
    def _register(name: str = "Ada Lovelace", email: str = "ada@example.com",
                  password: str = DEFAULT_PASSWORD) -> Dict[str, Any]:
        response = client.post("/auth/signup", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()
    return _register


@pytest.fixture
def login(client):
    def _login(email: str = "ada@example.com", password: str = DEFAULT_PASSWORD) -> Dict[str, str]:
        response = client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _login


@pytest.fixture
def user(register_user) -> Dict[str, Any]:
    return register_user()


@pytest.fixture
def auth_headers(user, login) -> Dict[str, str]:
    return login(user["email"])


def _creator(client, headers, path):
    def _create(**payload) -> Dict[str, Any]:
        response = client.post(path, json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def make_team(client, auth_headers):
    create = _creator(client, auth_headers, "/teams")

    def _make(name: str = "Eng", description: Optional[str] = None):
        return create(name=name, description=description)
    return _make


@pytest.fixture
def make_project(client, auth_headers):
    create = _creator(client, auth_headers, "/projects")

    def _make(name: str = "Apollo", description: Optional[str] = None):
        return create(name=name, description=description)
    return _make


@pytest.fixture
def make_tag(client, auth_headers):
    create = _creator(client, auth_headers, "/tags")

    def _make(name: str = "urgent"):
        return create(name=name)
    return _make


@pytest.fixture
def make_task(client, auth_headers):
    return _creator(client, auth_headers, "/tasks")
