"""
SQLAlchemy document store.

Implements the DocumentStore protocol over the `documents` table. Every
lookup opens its own AsyncSession because the executor runs chunk lookups
concurrently and a session must not be shared across tasks.

Dependencies: sqlalchemy, batchfetch.boundary.db
System role: Production DocumentStore
"""

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from batchfetch.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from batchfetch.core.exceptions import StoreLookupError
from batchfetch.core.store import RawDocument

logger = logging.getLogger(__name__)


class SqlDocumentStore:
    """DocumentStore backed by an async SQLAlchemy session factory."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        max_keys_per_query: int | None = None,
        crud: DocumentCRUD = document_crud,
    ) -> None:
        """
        Initialize SQL store.

        Args:
            session_factory: Factory producing one session per lookup
            max_keys_per_query: IN-list limit (defaults to the CRUD's limit)
            crud: CRUD helper issuing the queries
        """
        self._session_factory = session_factory
        self._crud = crud
        self.max_keys_per_query = (
            max_keys_per_query
            if max_keys_per_query is not None
            else crud.max_keys_per_query
        )

    async def fetch_by_keys_in(
        self,
        collection: str,
        keys: Sequence[str],
    ) -> list[RawDocument]:
        """
        Fetch documents whose key is in `keys`.

        Args:
            collection: Collection name
            keys: Document keys (at most max_keys_per_query)

        Returns:
            list[RawDocument]: (doc_id, fields) for each matching row

        Raises:
            BatchSizeExceededError: If too many keys are requested
            StoreLookupError: If the database query fails
        """
        try:
            async with self._session_factory() as session:
                rows = await self._crud.get_by_keys_in(
                    session,
                    collection,
                    keys,
                    max_keys=self.max_keys_per_query,
                )
                return [(row.doc_id, row.fields) for row in rows]
        except SQLAlchemyError as e:
            logger.error(
                f"{__name__}:fetch_by_keys_in - {type(e).__name__}: {e}",
                extra={"collection": collection, "key_count": len(keys)},
            )
            raise StoreLookupError(
                f"Lookup failed: {type(e).__name__}",
                collection,
                {"key_count": len(keys)},
            ) from e
