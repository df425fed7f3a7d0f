"""
CRUD operations for database models.

Usage:
    from batchfetch.boundary.db.CRUD import document_crud

    rows = await document_crud.get_by_keys_in(db, "products", ["p1", "p2"])
"""

from batchfetch.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud

__all__ = [
    "DocumentCRUD",
    "document_crud",
]
