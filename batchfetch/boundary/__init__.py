"""
Boundary adapters: concrete document stores behind the DocumentStore protocol.

Exports:
  - SqlDocumentStore: SQLAlchemy-backed store over the `documents` table
  - InMemoryDocumentStore: dictionary-backed store for development and tests
  - RetryingDocumentStore: opt-in tenacity retry wrapper around any store
  - build_document_store(): store assembled from settings
"""

from batchfetch.boundary.db.document_store import SqlDocumentStore
from batchfetch.boundary.factory import build_document_store
from batchfetch.boundary.memory_store import InMemoryDocumentStore
from batchfetch.boundary.retrying_store import RetryingDocumentStore

__all__ = [
    "SqlDocumentStore",
    "InMemoryDocumentStore",
    "RetryingDocumentStore",
    "build_document_store",
]
