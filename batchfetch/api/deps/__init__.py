"""FastAPI dependency factories."""

from batchfetch.api.deps.dependencies import (
    get_batch_fetch_service,
    get_document_store,
    get_settings_dependency,
)

__all__ = ["get_batch_fetch_service", "get_document_store", "get_settings_dependency"]
