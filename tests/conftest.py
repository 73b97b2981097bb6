"""
Pytest configuration and fixtures for the museum guide tests.
"""

import os

import pytest


os.environ.setdefault("SECRET_KEY", "test-secret-key")

from app import app as flask_app  # noqa: E402
from users import UserStore  # noqa: E402


@pytest.fixture
def users_file(tmp_path):
    return str(tmp_path / "data" / "users.json")


@pytest.fixture
def store(users_file):
    """UserStore backed by a temporary file that does not exist yet."""
    return UserStore(users_file)


@pytest.fixture
def app(users_file):
    flask_app.config.update(
        TESTING=True,
        USERS_FILE=users_file,
        GEMINI_API_KEY="test-api-key",
        GEMINI_MODEL="gemini-test",
    )
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signed_up(client):
    """Signs up Asha and returns the created user as JSON."""
    response = client.post(
        "/api/auth/signup",
        json={"name": "Asha", "email": "asha@example.com", "password": "secret1"},
    )
    assert response.status_code == 200
    return response.get_json()


class FakeModels:
    def __init__(self, reply=None, exc=None):
        self.reply = reply
        self.exc = exc
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc:
            raise self.exc
        return type("Response", (), {"text": self.reply})()


@pytest.fixture
def fake_gemini(monkeypatch):
    """Replaces google.genai.Client inside the scanner module."""
    import scanner

    models = FakeModels(reply='{"name": "Nataraja", "isArtifact": true}')

    class FakeClient:
        def __init__(self, api_key=None):
            self.api_key = api_key
            self.models = models

    monkeypatch.setattr(scanner.genai, "Client", FakeClient)
    return models
