"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts against a local MongoDB without any setup.  In a
deployment the port and the connection string are the two values you
will normally override (``PORT`` and ``MONGO_URL``).
"""

import os
from dataclasses import dataclass, field


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Article Portal API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    # Optional path of a log file; empty means console only.
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8080")))

    # MongoDB connection string.  If it names a database
    # (``mongodb://host/dbname``) that database is used unless
    # ``MONGO_DB_NAME`` is set explicitly.
    mongo_url: str = field(
        default_factory=lambda: _env("MONGO_URL", "mongodb://localhost:27017/article_portal")
    )
    mongo_db_name: str = field(default_factory=lambda: _env("MONGO_DB_NAME", ""))
    mongo_timeout_ms: int = field(default_factory=lambda: int(_env("MONGO_TIMEOUT_MS", "5000")))

    # Email is the lookup key for users but is not unique by default.
    # When enabled, startup creates a unique index on ``users.email``.
    enforce_unique_email: bool = field(default_factory=lambda: _env_bool("ENFORCE_UNIQUE_EMAIL"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module; tests build
# their own ``Settings()`` instances when they need other values.
settings = Settings()
