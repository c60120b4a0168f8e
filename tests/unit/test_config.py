"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from rentals.core.config import Settings


def test_database_url_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError, match="DATABASE_URL is required"):
        Settings(_env_file=None)


def test_page_size_bounds_are_validated() -> None:
    with pytest.raises(ValidationError, match="default_page_size"):
        Settings(
            _env_file=None,
            database_url="sqlite+aiosqlite:///x.db",
            default_page_size=50,
            max_page_size=20,
        )


def test_defaults() -> None:
    settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///x.db")
    assert settings.default_page_size == 10
    assert settings.autocomplete_page_size == 10
    assert settings.request_id_header == "X-Request-ID"
    assert settings.auto_create_schema is False
