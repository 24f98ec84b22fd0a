"""
MongoDB integration.

This module owns the single ``MongoClient`` used by the process.  The
client is created lazily by ``get_client`` (normally from ``init_db``
during application startup) and kept for the lifetime of the process;
handlers only ask for collections through ``get_collection``.

``init_db`` also prepares the ``users`` collection: an index on
``email`` is always created because every lookup goes through it, and
it is made unique when ``settings.enforce_unique_email`` is enabled.
"""

import logging
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from .config import settings


logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
ARTICLES_COLLECTION = "metadatas"
DEFAULT_DB_NAME = "article_portal"
EMAIL_INDEX = "email_1"

_client: Optional[MongoClient] = None


def set_client(client: Optional[MongoClient]) -> None:
    """Install an already constructed client (or clear it with ``None``).

    The test suite uses this to run against a ``mongomock.MongoClient``.
    """
    global _client
    _client = client


def get_client() -> MongoClient:
    """Return the process‑wide client, connecting on first use."""
    global _client
    if _client is None:
        logger.info("Connecting to MongoDB")
        _client = MongoClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            retryWrites=True,
        )
    return _client


def get_database() -> Database:
    """Return the configured database.

    ``MONGO_DB_NAME`` wins; otherwise the database named in the
    connection string is used, falling back to ``article_portal``.
    """
    client = get_client()
    if settings.mongo_db_name:
        return client[settings.mongo_db_name]
    return client.get_default_database(default=DEFAULT_DB_NAME)


def get_collection(name: str) -> Collection:
    return get_database()[name]


def _ensure_email_index(users: Collection, unique: bool) -> None:
    """Create the ``email`` index, rebuilding it when ``unique`` changed.

    MongoDB refuses to create an index whose name already exists with
    other options, so a stale index is dropped first.  If duplicates
    prevent the unique build, a plain index is restored and the error
    is raised.
    """
    existing = users.index_information().get(EMAIL_INDEX)
    if existing is not None and bool(existing.get("unique", False)) != unique:
        logger.info("Rebuilding index %s (unique=%s)", EMAIL_INDEX, unique)
        users.drop_index(EMAIL_INDEX)
    try:
        users.create_index([("email", ASCENDING)], name=EMAIL_INDEX, unique=unique)
    except DuplicateKeyError:
        logger.error(
            "Cannot enforce unique emails: collection %s already holds duplicate emails. "
            "Remove the duplicates or unset ENFORCE_UNIQUE_EMAIL.",
            users.name,
        )
        users.create_index([("email", ASCENDING)], name=EMAIL_INDEX, unique=False)
        raise


def init_db() -> None:
    """Connect and create the indexes the services rely on."""
    users = get_collection(USERS_COLLECTION)
    _ensure_email_index(users, settings.enforce_unique_email)
    logger.info(
        "MongoDB connected (database=%s, unique email=%s)",
        get_database().name,
        settings.enforce_unique_email,
    )


def close_db() -> None:
    """Close the client if one was opened."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB connection closed")
