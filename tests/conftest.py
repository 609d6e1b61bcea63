"""Shared test fixtures: in-memory SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - The app is built with create_app(database=...) so no test touches the
      configured DATABASE_URL
    - Seeding goes through the HTTP API; direct reads use a fresh session
"""

import os
import tempfile

# Keep log files out of the working tree when a test runs the app lifespan
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="adapi-test-logs-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.database.db_setup import Database
from app.database.initialize_db import init_db
from app.main import create_app


@pytest.fixture
def database():
    db = Database(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    init_db(db)
    yield db
    db.dispose()


@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def theme(client):
    res = client.post("/themes", json={"name": "Backend", "description": "API & Server"})
    assert res.status_code == 201
    return res.json()


@pytest.fixture
def make_resource(client, theme):
    """Factory creating resources through the API."""

    def _make(**overrides):
        body = {
            "title": "Guide Express",
            "url": "https://expressjs.com",
            "theme_id": theme["id"],
            "type": "guide",
            "is_ada": True,
        }
        body.update(overrides)
        res = client.post("/resources", json=body)
        assert res.status_code == 201, res.json()
        return res.json()

    return _make


@pytest.fixture
def make_skill(client):
    def _make(name="Node.js"):
        res = client.post("/skills", json={"name": name})
        assert res.status_code == 201, res.json()
        return res.json()

    return _make
