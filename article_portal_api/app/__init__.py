"""
Application package initializer.

The API is split into the usual layers: ``core`` (configuration,
logging, database handle and password digests), ``schemas`` (pydantic
models for users and articles), ``services`` (read‑modify‑write logic
over the document store) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
