"""
Document ORM model.

Stores every collection in one table: a document is addressed by
(collection, doc_id) and carries a free-form JSON body.

Dependencies: sqlalchemy, batchfetch.boundary.db.base
System role: Persistence for key/value document collections
"""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from batchfetch.boundary.db.base import Base, TimestampMixin


class DocumentModel(Base, TimestampMixin):
    """
    Document row keyed by collection and document id.

    Attributes:
        collection: Collection name (e.g. "products")
        doc_id: Document key, unique within its collection
        fields: JSON document body; may be NULL for an empty document
        created_at: Row creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "documents"

    collection: Mapped[str] = mapped_column(
        String(128),
        primary_key=True,
        doc="Collection the document belongs to",
    )
    doc_id: Mapped[str] = mapped_column(
        String(512),
        primary_key=True,
        doc="Document key within the collection",
    )
    fields: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
        doc="Document body",
    )

    def __repr__(self) -> str:
        return f"<DocumentModel({self.collection}/{self.doc_id})>"
