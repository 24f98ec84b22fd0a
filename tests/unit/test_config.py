"""
Unit tests for configuration management.
"""
from article_portal_api.app.core.config import Settings


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "MONGO_URL", "MONGO_DB_NAME", "ENFORCE_UNIQUE_EMAIL", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        config = Settings()
        assert config.port == 8080
        assert config.mongo_url == "mongodb://localhost:27017/article_portal"
        assert config.mongo_db_name == ""
        assert config.enforce_unique_email is False
        assert config.log_level == "INFO"

    def test_port_and_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("MONGO_URL", "mongodb://db:27017/portal")
        config = Settings()
        assert config.port == 9000
        assert config.mongo_url == "mongodb://db:27017/portal"

    def test_unique_email_flag(self, monkeypatch):
        monkeypatch.setenv("ENFORCE_UNIQUE_EMAIL", "yes")
        assert Settings().enforce_unique_email is True
        monkeypatch.setenv("ENFORCE_UNIQUE_EMAIL", "off")
        assert Settings().enforce_unique_email is False
