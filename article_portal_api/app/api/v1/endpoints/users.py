"""
User endpoints for API v1.

Profile lookup, creation, partial update, visit‑history append and
preferred‑keyword add/remove.  Successful mutations answer ``202`` with
the JSON string ``"Complete"``; no representation of the changed user
is returned.

Lookups of an unknown email through ``GET /users/{email}/`` answer
``200`` with ``null``.  Every other endpoint that needs an existing
user answers ``404``.  The GET routes accept the path with or without
the trailing slash.

Handlers are plain ``def`` functions: the service makes blocking pymongo
calls, which FastAPI then runs in its threadpool.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, HTTPException, Query, status

from article_portal_api.app.schemas.user import UserBase, UserRead, VisitEntry
from article_portal_api.app.services.user_service import (
    DuplicateUserError,
    InvalidUserData,
    UserNotFoundError,
    UserService,
)


router = APIRouter()

COMPLETE = "Complete"


@router.get("", response_model=Optional[UserBase])
def get_user_sample() -> Optional[Dict[str, Any]]:
    """Return a single user record without its ``_id``.

    Despite the plural path this is not a listing: one document is
    returned, or ``null`` when the collection is empty.
    """
    return UserService.get_first_user()


# Declared before the ``/{email}/...`` routes so the literal segment
# is never read as an email.
@router.get("/get-preferred-keywords", response_model=List[str])
def get_preferred_keywords(email: str = Query(..., min_length=1)) -> List[str]:
    """Return the preferred keywords of the user given by ``?email=``."""
    try:
        return UserService.get_preferred_keywords(email)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{email}/", response_model=Optional[UserRead])
@router.get("/{email}", response_model=Optional[UserRead], include_in_schema=False)
def get_user(email: str) -> Optional[Dict[str, Any]]:
    """Return the user stored under ``email``, or ``null``."""
    return UserService.get_user_by_email(email)


@router.get("/{email}/get-article-visits", response_model=List[VisitEntry])
@router.get("/{email}/get-article-visits/", response_model=List[VisitEntry], include_in_schema=False)
def get_article_visits(email: str) -> List[Dict[str, Any]]:
    try:
        return UserService.get_visit_history(email)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=str, status_code=status.HTTP_202_ACCEPTED)
def create_user(body: Dict[str, Any] = Body(...)) -> str:
    """Create a user from a six field body.

    ``name``, ``email``, ``phone`` and ``password`` must be non‑empty;
    ``visitHistory`` and ``preferredKeyword`` complete the six.  The
    password is stored as its MD5 digest.
    """
    try:
        UserService.create_user(body)
    except InvalidUserData as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except DuplicateUserError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return COMPLETE


@router.put("/{email}", response_model=str, status_code=status.HTTP_202_ACCEPTED)
def update_user(email: str, body: Dict[str, Any] = Body(...)) -> str:
    """Overwrite up to three fields of the user stored under ``email``.

    Only the fields present in the body change.  Lists sent here
    replace the stored lists entirely.
    """
    try:
        UserService.update_user(email, body)
    except InvalidUserData as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return COMPLETE


@router.put(
    "/{email}/article-visit/visited={article_id}&date={date}",
    response_model=str,
    status_code=status.HTTP_202_ACCEPTED,
)
def add_article_visit(email: str, article_id: str, date: str) -> str:
    """Append one visit entry; both values travel in the path."""
    try:
        UserService.append_visit(email, article_id, date)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return COMPLETE


@router.put("/{email}/addkw/{keyword}", response_model=str, status_code=status.HTTP_202_ACCEPTED)
def add_keyword(email: str, keyword: str) -> str:
    try:
        UserService.add_keyword(email, keyword)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return COMPLETE


@router.put("/{email}/removekw/{keyword}", response_model=str, status_code=status.HTTP_202_ACCEPTED)
def remove_keyword(email: str, keyword: str) -> str:
    try:
        UserService.remove_keyword(email, keyword)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return COMPLETE
