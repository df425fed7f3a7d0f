"""
Document store factory.

Assembles the configured DocumentStore: the SQL store, wrapped in the
retrying store only when more than one attempt is configured.

Dependencies: batchfetch.configs, batchfetch.boundary
System role: Store construction for the application layer
"""

import logging

from batchfetch.boundary.db.connection import get_async_session_factory
from batchfetch.boundary.db.document_store import SqlDocumentStore
from batchfetch.boundary.retrying_store import RetryingDocumentStore
from batchfetch.configs import Settings, get_settings
from batchfetch.core.store import DocumentStore
from batchfetch.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def build_document_store(settings: Settings | None = None) -> DocumentStore:
    """
    Build the DocumentStore described by settings.

    Args:
        settings: Application settings (defaults to get_settings())

    Returns:
        DocumentStore: SQL store, optionally wrapped with retries
    """
    settings = settings or get_settings()
    store: DocumentStore = SqlDocumentStore(
        get_async_session_factory(),
        max_keys_per_query=settings.database.max_keys_per_query,
    )

    batch = settings.batch
    if batch.retry_attempts > 1:
        log_with_context(
            logger,
            logging.INFO,
            "Document store retries enabled",
            retry_attempts=batch.retry_attempts,
            retry_max_wait=batch.retry_max_wait,
        )
        store = RetryingDocumentStore(
            store,
            attempts=batch.retry_attempts,
            initial_wait=batch.retry_initial_wait,
            max_wait=batch.retry_max_wait,
        )
    return store
