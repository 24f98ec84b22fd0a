"""
Business logic for users.

``UserService`` performs every user operation as a single
read‑modify‑write against the ``users`` collection.  There is no
version field and no transaction: two concurrent updates of the same
user both succeed and the later ``$set`` wins.

Validation failures raise ``InvalidUserData`` *before* anything is
read or written, so a rejected request never mutates the store.
Mutations of an unknown email raise ``UserNotFoundError``.  Errors
from the driver (``pymongo.errors.PyMongoError``) are not caught here.

Methods are synchronous because pymongo is; the endpoints calling them
are plain ``def`` functions so FastAPI runs them in its threadpool and
a slow store never blocks the event loop.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from article_portal_api.app.core.db import USERS_COLLECTION, get_collection
from article_portal_api.app.core.security import hash_password
from article_portal_api.app.schemas.user import (
    CREATE_FIELD_COUNT,
    MAX_UPDATE_FIELDS,
    REQUIRED_CREATE_FIELDS,
    UserCreate,
    UserUpdate,
    VisitEntry,
)


logger = logging.getLogger(__name__)

INCOMPATIBLE_FIELDS = "Data fields incompatible, cannot process request"


class UserNotFoundError(ValueError):
    """No user document matches the given email."""


class InvalidUserData(ValueError):
    """The request body does not satisfy the field rules."""


class DuplicateUserError(ValueError):
    """A user with the same email exists and emails are unique."""


def _users() -> Collection:
    return get_collection(USERS_COLLECTION)


def _validation_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{INCOMPATIBLE_FIELDS}: {location}: {first.get('msg')}"


class UserService:
    """Service for reading and mutating user documents."""

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    @classmethod
    def get_first_user(cls) -> Optional[Dict[str, Any]]:
        """Return one user document without its ``_id``.

        Backs ``GET /users``.  The collection is not listed; whichever
        document the store returns first is used.
        """
        return _users().find_one({}, {"_id": 0})

    @classmethod
    def get_user_by_email(cls, email: str) -> Optional[Dict[str, Any]]:
        """Return the user with ``email`` or ``None``.

        Emails are not unique unless ``ENFORCE_UNIQUE_EMAIL`` is set;
        with duplicates the store decides which document is returned.
        """
        logger.debug("Looking up user %s", email)
        document = _users().find_one({"email": email})
        if document is None:
            return None
        document["_id"] = str(document["_id"])
        return document

    @classmethod
    def get_visit_history(cls, email: str) -> List[Dict[str, Any]]:
        user = cls._require_user(email)
        return list(user.get("visitHistory") or [])

    @classmethod
    def get_preferred_keywords(cls, email: str) -> List[str]:
        user = cls._require_user(email)
        return list(user.get("preferredKeyword") or [])

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    @classmethod
    def create_user(cls, data: Dict[str, Any]) -> None:
        """Validate and insert a new user.

        ``data`` must contain exactly six fields with truthy
        ``name``/``email``/``phone``/``password``.  The password is
        stored as its MD5 digest.  Nothing is returned; the caller only
        acknowledges the creation.
        """
        if len(data) != CREATE_FIELD_COUNT or any(not data.get(f) for f in REQUIRED_CREATE_FIELDS):
            raise InvalidUserData(INCOMPATIBLE_FIELDS)
        try:
            user = UserCreate.model_validate(data)
        except ValidationError as exc:
            raise InvalidUserData(_validation_message(exc)) from exc

        document = user.model_dump()
        document["password"] = hash_password(user.password)
        try:
            _users().insert_one(document)
        except DuplicateKeyError as exc:
            raise DuplicateUserError(f"User {user.email} already exists") from exc
        logger.info("Created user %s", user.email)

    @classmethod
    def update_user(cls, email: str, fields: Dict[str, Any]) -> None:
        """Shallow‑merge ``fields`` onto the user stored under ``email``.

        At most three fields may be supplied.  Lists are replaced, not
        merged.  A supplied ``password`` is digested again.
        """
        if not email or len(fields) > MAX_UPDATE_FIELDS:
            raise InvalidUserData(INCOMPATIBLE_FIELDS)
        try:
            changes = UserUpdate.model_validate(fields).model_dump(exclude_unset=True)
        except ValidationError as exc:
            raise InvalidUserData(_validation_message(exc)) from exc
        nulls = sorted(key for key, value in changes.items() if value is None)
        if nulls:
            raise InvalidUserData(f"{INCOMPATIBLE_FIELDS}: {', '.join(nulls)} cannot be null")

        user = cls._require_user(email)
        if "password" in changes:
            changes["password"] = hash_password(changes["password"])
        cls._save(user, changes)
        logger.info("Updated user %s (%s)", email, ", ".join(sorted(changes)) or "no fields")

    @classmethod
    def append_visit(cls, email: str, article_id: str, date: str) -> None:
        """Append ``{articleId, date}`` to the end of ``visitHistory``.

        Duplicates are kept and the history is not capped.  The article
        id is not checked against the ``metadatas`` collection.
        """
        user = cls._require_user(email)
        entry = VisitEntry(articleId=article_id, date=date).model_dump()
        history = list(user.get("visitHistory") or []) + [entry]
        cls._save(user, {"visitHistory": history})
        logger.info("Recorded visit of %s to article %s", email, article_id)

    @classmethod
    def add_keyword(cls, email: str, keyword: str) -> None:
        """Append ``keyword`` to ``preferredKeyword`` (duplicates allowed)."""
        user = cls._require_user(email)
        keywords = list(user.get("preferredKeyword") or []) + [keyword]
        cls._save(user, {"preferredKeyword": keywords})
        logger.info("Added keyword %r for %s", keyword, email)

    @classmethod
    def remove_keyword(cls, email: str, keyword: str) -> None:
        """Remove every occurrence of ``keyword`` from ``preferredKeyword``."""
        user = cls._require_user(email)
        keywords = [kw for kw in user.get("preferredKeyword") or [] if kw != keyword]
        cls._save(user, {"preferredKeyword": keywords})
        logger.info("Removed keyword %r for %s", keyword, email)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @classmethod
    def _require_user(cls, email: str) -> Dict[str, Any]:
        user = _users().find_one({"email": email})
        if user is None:
            raise UserNotFoundError(f"User {email} not found")
        return user

    @classmethod
    def _save(cls, user: Dict[str, Any], changes: Dict[str, Any]) -> None:
        # Only the changed paths are written, like a document save.
        if changes:
            _users().update_one({"_id": user["_id"]}, {"$set": changes})
