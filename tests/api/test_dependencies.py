"""
Test suite for dependency injection container.

System role: Verification of DI container
"""

from unittest.mock import MagicMock

from batchfetch.api.deps import get_batch_fetch_service
from batchfetch.application.services import BatchFetchService
from batchfetch.configs.batch import BatchFetchSettings
from batchfetch.configs.database import DatabaseSettings
from batchfetch.configs.settings import Settings


class TestGetBatchFetchService:
    """Test suite for get_batch_fetch_service factory."""

    def test_should_bind_store_and_settings(self) -> None:
        """Test the service wraps a fetcher over the injected store."""
        store = MagicMock()
        settings = Settings(batch=BatchFetchSettings(batch_size=10, chunk_timeout_seconds=3))

        service = get_batch_fetch_service(settings=settings, store=store)

        assert isinstance(service, BatchFetchService)
        assert service.fetcher.store is store
        assert service.fetcher.batch_size == 10
        assert service.fetcher.chunk_timeout == 3

    def test_should_cap_batch_size_at_store_limit(self) -> None:
        """Test chunks never exceed the store's key limit."""
        settings = Settings(
            database=DatabaseSettings(max_keys_per_query=5),
            batch=BatchFetchSettings(batch_size=10),
        )

        service = get_batch_fetch_service(settings=settings, store=MagicMock())

        assert service.fetcher.batch_size == 5
