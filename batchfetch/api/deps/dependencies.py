"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: batchfetch.configs, batchfetch.application, batchfetch.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from batchfetch.application.services import BatchFetchService
from batchfetch.boundary.factory import build_document_store
from batchfetch.configs import Settings, get_settings
from batchfetch.core.batch_fetcher import BatchFetcher
from batchfetch.core.store import DocumentStore


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


@lru_cache
def get_document_store() -> DocumentStore:
    """
    Get the shared document store.

    Built once; the SQL store opens a session per lookup so sharing it
    across requests is safe.

    Returns:
        DocumentStore: Configured store
    """
    return build_document_store(get_settings_dependency())


def get_batch_fetch_service(
    settings: Settings = Depends(get_settings_dependency),
    store: DocumentStore = Depends(get_document_store),
) -> BatchFetchService:
    """
    Get batch fetch service instance.

    Chunks are capped at the store's own key limit so no lookup is
    rejected for size.

    Args:
        settings: Application settings (injected)
        store: Document store (injected)

    Returns:
        BatchFetchService: Service bound to a configured BatchFetcher
    """
    fetcher = BatchFetcher(
        store,
        batch_size=min(settings.batch.batch_size, settings.database.max_keys_per_query),
        chunk_timeout=settings.batch.chunk_timeout_seconds,
    )
    return BatchFetchService(fetcher)
