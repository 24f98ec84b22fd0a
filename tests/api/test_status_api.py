"""
API tests for the liveness endpoint and application wiring.
"""
from fastapi.testclient import TestClient

from article_portal_api.app.core import db
from article_portal_api.app.main import app


class TestStatus:
    """Test suite for GET /."""

    def test_root_acknowledges(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Acknowledged!"
        assert response.headers["content-type"].startswith("text/plain")

    def test_cors_allows_any_origin(self, client):
        response = client.get("/", headers={"Origin": "http://localhost:3000"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_startup_creates_email_index(self, client, users):
        index = users.index_information()["email_1"]
        assert index["key"] == [("email", 1)]
        assert not index.get("unique", False)

    def test_shutdown_releases_client(self, mongo_client):
        with TestClient(app):
            assert db.get_client() is mongo_client
        assert db._client is None
