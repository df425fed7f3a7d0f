"""
Test suite for configuration settings.

System role: Verification of environment-driven configuration
"""

import pytest
from pydantic import ValidationError

from batchfetch.configs.batch import BatchFetchSettings
from batchfetch.configs.database import DatabaseSettings
from batchfetch.configs.settings import Settings


class TestBatchFetchSettings:
    """Test suite for BatchFetchSettings."""

    def test_defaults_should_match_store_limit(self) -> None:
        """Test default batch size is 10 with no timeout and no retry."""
        settings = BatchFetchSettings()

        assert settings.batch_size == 10
        assert settings.chunk_timeout_seconds is None
        assert settings.retry_attempts == 1

    def test_should_read_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test BATCH_FETCH_* variables are applied."""
        monkeypatch.setenv("BATCH_FETCH_BATCH_SIZE", "25")
        monkeypatch.setenv("BATCH_FETCH_CHUNK_TIMEOUT_SECONDS", "1.5")

        settings = BatchFetchSettings()

        assert settings.batch_size == 25
        assert settings.chunk_timeout_seconds == 1.5

    @pytest.mark.parametrize("field", ["batch_size", "retry_attempts"])
    def test_should_reject_values_below_one(self, field: str) -> None:
        """Test sizes and attempts must be positive."""
        with pytest.raises(ValidationError):
            BatchFetchSettings(**{field: 0})


class TestDatabaseSettings:
    """Test suite for DatabaseSettings."""

    def test_async_database_url_should_use_asyncpg(self) -> None:
        """Test the URL is built from individual fields."""
        settings = DatabaseSettings(
            host="db", port=5433, user="u", password="p", db="shop", sslmode="require"
        )

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5433/shop?ssl=require"

    def test_sslmode_should_default_to_prefer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a local database without TLS is reachable by default."""
        monkeypatch.delenv("POSTGRES_SSLMODE", raising=False)

        settings = DatabaseSettings(host="localhost", user="u", password="p", db="shop")

        assert settings.sslmode == "prefer"
        assert settings.async_database_url.endswith("/shop?ssl=prefer")

    def test_sslmode_should_reject_unknown_mode(self) -> None:
        """Test only libpq SSL modes are accepted."""
        with pytest.raises(ValidationError):
            DatabaseSettings(sslmode="sometimes")

    def test_async_database_url_should_prefer_override(self) -> None:
        """Test an explicit url wins."""
        settings = DatabaseSettings(url="sqlite+aiosqlite:///dev.db")

        assert settings.async_database_url == "sqlite+aiosqlite:///dev.db"


class TestSettings:
    """Test suite for aggregated Settings."""

    def test_settings_should_aggregate_sections(self) -> None:
        """Test nested sections are present with defaults."""
        settings = Settings()

        assert settings.batch.batch_size == 10
        assert settings.database.max_keys_per_query == 10
