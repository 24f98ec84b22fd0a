"""
Pydantic models for user documents.

Field names follow the stored documents exactly (``visitHistory``,
``preferredKeyword``, ``articleId``) because the collection is shared
with the existing frontend.  String fields are capped at 2047
characters like the original collection schema.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


MAX_TEXT_LENGTH = 2047

# Number of top‑level fields a create request must carry.
CREATE_FIELD_COUNT = 6
# Upper bound on the number of fields a partial update may carry.
MAX_UPDATE_FIELDS = 3
# Fields that must be truthy when a user is created.
REQUIRED_CREATE_FIELDS = ("name", "email", "phone", "password")


class VisitEntry(BaseModel):
    """A single article visit appended to ``visitHistory``."""

    articleId: str = Field(..., examples=["64f1c0ffee0000000000abcd"])
    date: str = Field(..., examples=["2023-09-01"])


class UserBase(BaseModel):
    name: str = Field(..., max_length=MAX_TEXT_LENGTH, examples=["Ada Lovelace"])
    email: str = Field(..., max_length=MAX_TEXT_LENGTH, examples=["ada@example.com"])
    phone: int = Field(..., examples=[1234567890])
    # Holds the MD5 digest once stored; the plain value is only seen on input.
    password: str = Field(..., max_length=MAX_TEXT_LENGTH)
    visitHistory: List[VisitEntry] = Field(default_factory=list)
    preferredKeyword: List[str] = Field(default_factory=list)

    # Unknown keys are dropped, matching the strict collection schema.
    model_config = {"extra": "ignore"}


class UserCreate(UserBase):
    """Schema for ``POST /users``.

    The field count and truthiness checks happen before this model is
    built (see ``UserService.create_user``); the model adds type and
    length validation on top.
    """


class UserUpdate(BaseModel):
    """Schema for a partial update.

    Every field is optional; only the keys present in the request are
    written back (``model_dump(exclude_unset=True)``).
    """

    name: Optional[str] = Field(None, max_length=MAX_TEXT_LENGTH)
    email: Optional[str] = Field(None, max_length=MAX_TEXT_LENGTH)
    phone: Optional[int] = None
    password: Optional[str] = Field(None, max_length=MAX_TEXT_LENGTH)
    visitHistory: Optional[List[VisitEntry]] = None
    preferredKeyword: Optional[List[str]] = None

    model_config = {"extra": "ignore"}


class UserRead(UserBase):
    """A stored user as returned by ``GET /users/{email}/``.

    The MongoDB ``_id`` is exposed under its stored name as a string.
    """

    id: str = Field(..., alias="_id")

    model_config = {"extra": "ignore", "populate_by_name": True}
