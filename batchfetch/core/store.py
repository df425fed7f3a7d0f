"""
Document store capability consumed by the batch fetch executor.

Any object with an async fetch_by_keys_in method satisfies the protocol;
the SQLAlchemy and in-memory stores in batchfetch.boundary are the
shipped implementations.

Dependencies: typing
System role: Boundary contract between the executor and concrete stores
"""

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

FieldMap = Mapping[str, Any]
RawDocument = tuple[str, FieldMap | None]


@runtime_checkable
class DocumentStore(Protocol):
    """Multi-key lookup against a named document collection."""

    async def fetch_by_keys_in(
        self,
        collection: str,
        keys: Sequence[str],
    ) -> list[RawDocument]:
        """
        Fetch the documents whose key is in `keys`.

        Keys without a matching document are simply omitted. Never returns
        a key that was not requested. May raise any exception on failure.

        Args:
            collection: Collection name
            keys: Keys to look up (at most the store's per-query limit)

        Returns:
            list[RawDocument]: (key, fields) pairs; fields may be None
        """
        ...
