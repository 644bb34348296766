"""Settings — verifies database URL normalization and defaults."""

from library_api.config import Settings


def test_plain_postgres_url_gets_asyncpg_driver():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_urls_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db")
    assert settings.database_url == "sqlite+aiosqlite:///x.db"


def test_log_format_read_from_env(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "json")
    assert Settings().log_format == "json"
