"""Tests for Settings validation and derived properties."""

import pytest
from pydantic import ValidationError

from inkbot.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.timezone == "Asia/Tokyo"
    assert settings.schedules_url == "https://splatoon3.ink/data/schedules.json"
    assert settings.locale_url == "https://splatoon3.ink/data/locale/ja-JP.json"
    assert str(settings.tz) == "Asia/Tokyo"


def test_db_url_from_parts():
    settings = Settings(
        DB_HOST="db", DB_PORT=6543, DB_USER="u", DB_PASSWORD="p", DB_NAME="n", _env_file=None
    )
    assert settings.db_url == "postgresql+asyncpg://u:p@db:6543/n"


def test_database_url_override():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:", _env_file=None)
    assert settings.db_url == "sqlite+aiosqlite:///:memory:"


def test_token_from_env(monkeypatch):
    monkeypatch.setenv("CHANNEL_ACCESS_TOKEN", "from-env")
    monkeypatch.setenv("INKBOT_MAX_LOOKAHEAD", "3")
    settings = Settings(_env_file=None)

    assert settings.channel_access_token == "from-env"
    assert settings.max_lookahead == 3


def test_invalid_timezone_rejected():
    with pytest.raises(ValidationError):
        Settings(timezone="Mars/Olympus_Mons", _env_file=None)


def test_negative_lookahead_rejected():
    with pytest.raises(ValidationError):
        Settings(max_lookahead=-1, _env_file=None)


def test_invalid_cache_backend_rejected():
    with pytest.raises(ValidationError):
        Settings(cache_backend="redis", _env_file=None)
