"""
Unit tests for the MongoDB handle.
"""
import logging
from unittest.mock import patch

import mongomock
import pytest
from pymongo.errors import DuplicateKeyError

from article_portal_api.app.core import db
from article_portal_api.app.core.config import settings


class TestDatabaseHandle:
    """Test suite for the db module."""

    def test_get_client_connects_once(self, monkeypatch):
        monkeypatch.setattr(db, "_client", None)
        with patch.object(db, "MongoClient") as mongo_client_cls:
            first = db.get_client()
            second = db.get_client()
        assert first is second
        mongo_client_cls.assert_called_once()
        assert mongo_client_cls.call_args.args[0] == settings.mongo_url
        db.set_client(None)

    def test_explicit_database_name(self, mongo_client):
        assert db.get_database().name == "article_portal_test"

    def test_database_name_from_url(self, monkeypatch):
        client = mongomock.MongoClient("mongodb://localhost:27017/from_url")
        monkeypatch.setattr(settings, "mongo_db_name", "")
        db.set_client(client)
        try:
            assert db.get_database().name == "from_url"
        finally:
            db.set_client(None)

    def test_get_collection(self, mongo_client):
        assert db.get_collection(db.USERS_COLLECTION).name == "users"
        assert db.get_collection(db.ARTICLES_COLLECTION).name == "metadatas"

    def test_init_db_unique_email(self, mongo_client, users, monkeypatch):
        monkeypatch.setattr(settings, "enforce_unique_email", True)
        db.init_db()
        users.insert_one({"email": "a@x.com"})
        with pytest.raises(DuplicateKeyError):
            users.insert_one({"email": "a@x.com"})

    def test_init_db_enables_unique_on_existing_index(self, mongo_client, users, monkeypatch):
        """Turning the flag on between two startups rebuilds the email index."""
        db.init_db()
        assert not users.index_information()[db.EMAIL_INDEX].get("unique", False)

        monkeypatch.setattr(settings, "enforce_unique_email", True)
        db.init_db()
        assert users.index_information()[db.EMAIL_INDEX].get("unique") is True
        users.insert_one({"email": "a@x.com"})
        with pytest.raises(DuplicateKeyError):
            users.insert_one({"email": "a@x.com"})

    def test_init_db_disables_unique_on_existing_index(self, mongo_client, users, monkeypatch):
        monkeypatch.setattr(settings, "enforce_unique_email", True)
        db.init_db()
        monkeypatch.setattr(settings, "enforce_unique_email", False)
        db.init_db()
        assert not users.index_information()[db.EMAIL_INDEX].get("unique", False)
        users.insert_many([{"email": "a@x.com"}, {"email": "a@x.com"}])

    def test_init_db_repeated_startup_is_stable(self, mongo_client, users):
        db.init_db()
        db.init_db()
        assert db.EMAIL_INDEX in users.index_information()

    def test_init_db_duplicates_block_unique_index(self, mongo_client, users, monkeypatch, caplog):
        db.init_db()
        users.insert_many([{"email": "a@x.com"}, {"email": "a@x.com"}])
        monkeypatch.setattr(settings, "enforce_unique_email", True)
        with caplog.at_level(logging.ERROR, logger=db.__name__):
            with pytest.raises(DuplicateKeyError):
                db.init_db()
        assert "duplicate emails" in caplog.text
        index = users.index_information()[db.EMAIL_INDEX]
        assert not index.get("unique", False)

    def test_close_db_clears_client(self, mongo_client):
        db.close_db()
        assert db._client is None
        db.close_db()
