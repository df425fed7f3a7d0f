"""
Database boundary layer: ORM model, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - get_async_db(): Request-scoped session dependency for FastAPI
  - DocumentModel: Stored document row (collection, doc_id, fields)
  - DocumentCRUD, document_crud: Multi-key lookups
  - SqlDocumentStore: DocumentStore implementation over the CRUD layer

Dependencies: sqlalchemy, batchfetch.configs
System role: Database adapter providing the document collections read by
the batch fetch executor.
"""

from batchfetch.boundary.db.base import Base, TimestampMixin
from batchfetch.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from batchfetch.boundary.db.models.document_model import DocumentModel
from batchfetch.boundary.db.CRUD import DocumentCRUD, document_crud
from batchfetch.boundary.db.document_store import SqlDocumentStore

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "DocumentModel",
    # CRUD
    "DocumentCRUD",
    "document_crud",
    # Store
    "SqlDocumentStore",
]
