"""ORM models."""

from batchfetch.boundary.db.models.document_model import DocumentModel

__all__ = ["DocumentModel"]
