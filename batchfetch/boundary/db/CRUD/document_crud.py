"""
Document CRUD operations.

Read-side query for DocumentModel: the bounded multi-key IN lookup used
by the batch fetch executor.

Dependencies: sqlalchemy, batchfetch.boundary.db.models.document_model
System role: Document persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from batchfetch.boundary.db.models.document_model import DocumentModel
from batchfetch.core.exceptions import BatchSizeExceededError

DEFAULT_MAX_KEYS_PER_QUERY = 10


class DocumentCRUD:
    """
    CRUD operations for DocumentModel.

    Attributes:
        model: The SQLAlchemy model class to operate on
        max_keys_per_query: Largest IN-list accepted by get_by_keys_in
    """

    def __init__(self, max_keys_per_query: int = DEFAULT_MAX_KEYS_PER_QUERY) -> None:
        """
        Initialize DocumentCRUD.

        Args:
            max_keys_per_query: Largest IN-list accepted by get_by_keys_in
        """
        self.model = DocumentModel
        self.max_keys_per_query = max_keys_per_query

    async def get_by_keys_in(
        self,
        session: AsyncSession,
        collection: str,
        keys: Sequence[str],
        max_keys: int | None = None,
    ) -> Sequence[DocumentModel]:
        """
        Retrieve the documents of a collection whose key is in `keys`.

        Keys with no matching row are omitted from the result.

        Args:
            session: Async database session
            collection: Collection name
            keys: Document keys to match
            max_keys: Override for max_keys_per_query

        Returns:
            Sequence of matching DocumentModels

        Raises:
            BatchSizeExceededError: If more keys are given than the limit
        """
        limit = max_keys if max_keys is not None else self.max_keys_per_query
        if len(keys) > limit:
            raise BatchSizeExceededError(collection, len(keys), limit)
        if not keys:
            return []

        stmt = select(DocumentModel).where(
            DocumentModel.collection == collection,
            DocumentModel.doc_id.in_(list(keys)),
        )
        result = await session.execute(stmt)
        return result.scalars().all()


document_crud = DocumentCRUD()
