"""Tests for settings and the Tortoise database URL."""

import pytest

from woofadaar.config import Settings, config
from woofadaar.database.config import get_tortoise_db_url


def test_defaults_use_sqlite() -> None:
    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite://db.sqlite3"
    assert settings.NEW_USER_WINDOW_DAYS == 30
    assert settings.GAMIFICATION_CATALOG_PATH is None


def test_database_url_scheme_normalized() -> None:
    settings = Settings(_env_file=None, DATABASE_URL="postgres://u:p@host:5432/woof")

    assert settings.database_url == "postgresql://u:p@host:5432/woof"


def test_production_requires_password() -> None:
    settings = Settings(_env_file=None, ENVIRONMENT="production")

    with pytest.raises(ValueError):
        settings.database_url


def test_production_builds_postgres_url() -> None:
    settings = Settings(
        _env_file=None,
        ENVIRONMENT="production",
        POSTGRES_HOST="db",
        POSTGRES_PASSWORD="secret",
    )

    assert settings.database_url == "postgresql://woofadaar:secret@db:5432/woofadaar"


def test_log_level_normalized() -> None:
    assert Settings(_env_file=None, LOG_LEVEL=" debug ").LOG_LEVEL == "DEBUG"


def test_tortoise_url_uses_postgres_scheme(monkeypatch) -> None:
    monkeypatch.setattr(config, "DATABASE_URL", "postgresql://u:p@host/woof")

    assert get_tortoise_db_url() == "postgres://u:p@host/woof"
