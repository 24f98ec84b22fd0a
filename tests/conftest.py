"""
Shared fixtures.

The application runs against an in‑memory ``mongomock`` client that is
installed through ``db.set_client`` before the app starts, so no
MongoDB server is needed.
"""
import mongomock
import pytest
from fastapi.testclient import TestClient

from article_portal_api.app.core import db
from article_portal_api.app.core.config import settings
from article_portal_api.app.main import app

TEST_DB_NAME = "article_portal_test"


@pytest.fixture
def mongo_client(monkeypatch):
    """Install a fresh mongomock client for the duration of a test."""
    client = mongomock.MongoClient()
    monkeypatch.setattr(settings, "mongo_db_name", TEST_DB_NAME)
    monkeypatch.setattr(settings, "enforce_unique_email", False)
    db.set_client(client)
    yield client
    db.set_client(None)


@pytest.fixture
def users(mongo_client):
    return mongo_client[TEST_DB_NAME][db.USERS_COLLECTION]


@pytest.fixture
def client(mongo_client):
    """TestClient with startup/shutdown hooks executed."""
    with TestClient(app) as test_client:
        yield test_client
