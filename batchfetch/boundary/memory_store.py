"""
In-memory document store.

Dictionary-backed DocumentStore that enforces the same per-query key
limit as the SQL store. Used for local development and tests.

Dependencies: None
System role: Lightweight DocumentStore implementation
"""

from typing import Any, Mapping, Sequence

from batchfetch.core.exceptions import BatchSizeExceededError
from batchfetch.core.store import RawDocument


class InMemoryDocumentStore:
    """DocumentStore over nested dicts: collection -> doc_id -> fields."""

    def __init__(
        self,
        collections: Mapping[str, Mapping[str, Mapping[str, Any] | None]] | None = None,
        max_keys_per_query: int = 10,
    ) -> None:
        self._collections: dict[str, dict[str, Mapping[str, Any] | None]] = {
            name: dict(documents) for name, documents in (collections or {}).items()
        }
        self.max_keys_per_query = max_keys_per_query
        self.lookups: list[tuple[str, list[str]]] = []

    def put(self, collection: str, doc_id: str, fields: Mapping[str, Any] | None) -> None:
        """Insert or replace a document."""
        self._collections.setdefault(collection, {})[doc_id] = fields

    async def fetch_by_keys_in(
        self,
        collection: str,
        keys: Sequence[str],
    ) -> list[RawDocument]:
        """
        Fetch documents whose key is in `keys`.

        Raises:
            BatchSizeExceededError: If more keys are given than the limit
        """
        if len(keys) > self.max_keys_per_query:
            raise BatchSizeExceededError(collection, len(keys), self.max_keys_per_query)
        self.lookups.append((collection, list(keys)))

        documents = self._collections.get(collection, {})
        return [
            (key, dict(documents[key]) if documents[key] is not None else None)
            for key in keys
            if key in documents
        ]
