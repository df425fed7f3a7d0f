"""
Test suite for build_document_store.

System role: Verification of store assembly from settings
"""

from unittest.mock import MagicMock, patch

from batchfetch.boundary.db.document_store import SqlDocumentStore
from batchfetch.boundary.factory import build_document_store
from batchfetch.boundary.retrying_store import RetryingDocumentStore
from batchfetch.configs.batch import BatchFetchSettings
from batchfetch.configs.database import DatabaseSettings
from batchfetch.configs.settings import Settings


def make_settings(retry_attempts: int = 1) -> Settings:
    return Settings(
        database=DatabaseSettings(max_keys_per_query=8),
        batch=BatchFetchSettings(retry_attempts=retry_attempts, retry_initial_wait=0.1),
    )


class TestBuildDocumentStore:
    """Test suite for build_document_store()."""

    def test_should_build_plain_sql_store_by_default(self) -> None:
        """Test no retry wrapper is added for a single attempt."""
        with patch(
            "batchfetch.boundary.factory.get_async_session_factory",
            return_value=MagicMock(),
        ):
            store = build_document_store(make_settings())

        assert isinstance(store, SqlDocumentStore)
        assert store.max_keys_per_query == 8

    def test_should_wrap_with_retries_when_enabled(self) -> None:
        """Test retry_attempts > 1 adds the retrying wrapper."""
        with patch(
            "batchfetch.boundary.factory.get_async_session_factory",
            return_value=MagicMock(),
        ):
            store = build_document_store(make_settings(retry_attempts=4))

        assert isinstance(store, RetryingDocumentStore)
        assert store.attempts == 4
        assert store.initial_wait == 0.1
        assert isinstance(store.inner, SqlDocumentStore)
