"""Article Portal API client.

A thin wrapper around the REST API served by
:mod:`article_portal_api.app.main`, built on ``requests``.  Every
method returns a tuple ``(data, error)``: on success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for list
results) and ``error`` is a dictionary with ``status_code`` and
``message``.

The client exposes one method per endpoint:

* :meth:`ping` – liveness check (``GET /``).
* :meth:`get_any_user` – one user record (``GET /users``).
* :meth:`get_user` – user by email.
* :meth:`get_article_visits` / :meth:`get_preferred_keywords`.
* :meth:`create_user` / :meth:`update_user`.
* :meth:`add_article_visit`, :meth:`add_keyword`, :meth:`remove_keyword`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


def _segment(value: Any) -> str:
    """Quote a value for use as a single path segment."""
    return quote(str(value), safe="@")


class ArticlePortalClient:
    """Client for interacting with the Article Portal API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        JSON responses are decoded; the plain‑text liveness response is
        returned as a string.  Error messages are taken from the JSON
        ``detail`` field when present, otherwise from the raw body (the
        API answers store failures with plain text).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if response.headers.get("content-type", "").startswith("application/json"):
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") if isinstance(err_json, dict) else None
                    message = message or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": str(message)}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def ping(self) -> Tuple[Optional[str], Optional[Error]]:
        return self._request("GET", "/")

    def get_any_user(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the single user record served by ``GET /users``."""
        return self._request("GET", "/users")

    def get_user(self, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the user with ``email``; ``(None, None)`` when unknown."""
        return self._request("GET", f"/users/{_segment(email)}/")

    def get_article_visits(self, email: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/users/{_segment(email)}/get-article-visits")
        if error:
            return [], error
        return data or [], None

    def get_preferred_keywords(self, email: str) -> Tuple[List[str], Optional[Error]]:
        data, error = self._request("GET", "/users/get-preferred-keywords", params={"email": email})
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_user(
        self,
        *,
        name: str,
        email: str,
        phone: int,
        password: str,
        visit_history: Optional[List[Dict[str, str]]] = None,
        preferred_keywords: Optional[List[str]] = None,
    ) -> Tuple[bool, Optional[Error]]:
        """Create a user.  The API expects all six fields to be sent."""
        payload = {
            "name": name,
            "email": email,
            "phone": phone,
            "password": password,
            "visitHistory": visit_history or [],
            "preferredKeyword": preferred_keywords or [],
        }
        _, error = self._request("POST", "/users", json_body=payload)
        return error is None, error

    def update_user(self, email: str, fields: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Overwrite up to three fields of a user."""
        _, error = self._request("PUT", f"/users/{_segment(email)}", json_body=fields)
        return error is None, error

    def add_article_visit(self, email: str, article_id: str, date: str) -> Tuple[bool, Optional[Error]]:
        path = (
            f"/users/{_segment(email)}/article-visit/"
            f"visited={_segment(article_id)}&date={_segment(date)}"
        )
        _, error = self._request("PUT", path)
        return error is None, error

    def add_keyword(self, email: str, keyword: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("PUT", f"/users/{_segment(email)}/addkw/{_segment(keyword)}")
        return error is None, error

    def remove_keyword(self, email: str, keyword: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("PUT", f"/users/{_segment(email)}/removekw/{_segment(keyword)}")
        return error is None, error
