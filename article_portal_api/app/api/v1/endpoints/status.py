"""
Liveness endpoint for API v1.

``GET /`` answers with a fixed plain‑text acknowledgement and does not
touch the database, so it reports on the process only.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()

ACKNOWLEDGED = "Acknowledged!"


@router.get("/", response_class=PlainTextResponse)
async def acknowledge() -> str:
    return ACKNOWLEDGED
