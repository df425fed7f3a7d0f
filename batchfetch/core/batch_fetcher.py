"""
Batch fetch executor.

Resolves a list of document ids against a DocumentStore whose multi-key
lookup accepts a bounded number of keys. Ids are deduplicated, split into
chunks, fetched concurrently, and merged into one id -> record mapping.

A failing chunk is logged through the batch error hook and contributes
nothing to the result; the call itself never raises for a chunk failure.

Dependencies: asyncio, batchfetch.core, batchfetch.observability
System role: Fan-out/fan-in engine behind every batch document lookup
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from batchfetch.configs.batch import BatchFetchSettings
from batchfetch.core.chunking import chunk_items, dedupe_ids
from batchfetch.core.exceptions import InvalidChunkSizeError
from batchfetch.core.store import DocumentStore
from batchfetch.models.batch import BatchErrorContext, BatchFetchReport
from batchfetch.observability.log_utils import log_batch_error

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10

Record = dict[str, Any]
BatchErrorHook = Callable[[BatchErrorContext, BaseException], None]


def build_record(doc_id: str, fields: Mapping[str, Any] | None) -> Record:
    """
    Normalize a raw document into a record.

    The stored fields are copied and `id` is always set to the document's
    key, replacing any `id` the body carried.

    Args:
        doc_id: Document key
        fields: Stored field mapping (None for an empty body)

    Returns:
        Record: Field copy with authoritative `id`
    """
    return {**(fields or {}), "id": doc_id}


@dataclass
class _ChunkOutcome:
    """Result of one chunk lookup, merged after all chunks settle."""

    batch_index: int
    keys: list[str]
    records: dict[str, Record] = field(default_factory=dict)
    error: BaseException | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class BatchFetcher:
    """
    Concurrent chunked document fetcher.

    Attributes:
        store: DocumentStore used for each chunk lookup
        batch_size: Maximum keys per lookup
        chunk_timeout: Optional per-chunk timeout in seconds
    """

    def __init__(
        self,
        store: DocumentStore,
        batch_size: int = DEFAULT_BATCH_SIZE,
        chunk_timeout: float | None = None,
        on_batch_error: BatchErrorHook = log_batch_error,
    ) -> None:
        """
        Initialize fetcher.

        Args:
            store: Store providing fetch_by_keys_in
            batch_size: Maximum keys per lookup (must be >= 1)
            chunk_timeout: Seconds before a chunk lookup counts as failed
            on_batch_error: Hook called once per failed chunk

        Raises:
            InvalidChunkSizeError: If batch_size is below 1
        """
        if batch_size < 1:
            raise InvalidChunkSizeError(batch_size)
        self.store = store
        self.batch_size = batch_size
        self.chunk_timeout = chunk_timeout
        self._on_batch_error = on_batch_error

    @classmethod
    def from_settings(
        cls,
        store: DocumentStore,
        settings: BatchFetchSettings | None = None,
    ) -> "BatchFetcher":
        """
        Build a fetcher from BatchFetchSettings.

        Args:
            store: Store providing fetch_by_keys_in
            settings: Batch settings (loaded from the environment if None)

        Returns:
            BatchFetcher: Configured fetcher
        """
        settings = settings or BatchFetchSettings()
        return cls(
            store,
            batch_size=settings.batch_size,
            chunk_timeout=settings.chunk_timeout_seconds,
        )

    async def fetch(self, collection: str, ids: Iterable[str]) -> dict[str, Record]:
        """
        Fetch documents by id.

        Args:
            collection: Collection name
            ids: Document ids, duplicates allowed

        Returns:
            dict[str, Record]: Records keyed by id for every id that was
            found in a chunk that succeeded
        """
        outcomes = await self._run(collection, ids)
        return self._merge(outcomes)

    async def fetch_detailed(
        self,
        collection: str,
        ids: Iterable[str],
    ) -> BatchFetchReport:
        """
        Fetch documents by id and report missing and failed ids separately.

        Args:
            collection: Collection name
            ids: Document ids, duplicates allowed

        Returns:
            BatchFetchReport: Documents plus not-found and failed ids
        """
        outcomes = await self._run(collection, ids)
        report = BatchFetchReport(collection=collection, documents=self._merge(outcomes))
        for outcome in outcomes:
            if outcome.failed:
                report.failed.extend(outcome.keys)
                report.failed_batches.append(outcome.batch_index)
            else:
                report.not_found.extend(
                    key for key in outcome.keys if key not in outcome.records
                )
        return report

    async def _run(
        self,
        collection: str,
        ids: Iterable[str],
    ) -> list[_ChunkOutcome]:
        unique_ids = dedupe_ids(ids)
        if not unique_ids:
            return []

        chunks = chunk_items(unique_ids, self.batch_size)
        logger.debug(
            f"{__name__}:fetch - START collection={collection}, "
            f"unique_ids={len(unique_ids)}, batches={len(chunks)}"
        )

        # A cancelled chunk comes back as CancelledError; cancelling the
        # caller still propagates out of gather.
        results = await asyncio.gather(
            *(self._fetch_chunk(collection, keys) for keys in chunks),
            return_exceptions=True,
        )

        outcomes = []
        for batch_index, (keys, result) in enumerate(zip(chunks, results), start=1):
            if isinstance(result, BaseException):
                outcome = _ChunkOutcome(batch_index, keys, error=result)
                self._report_failure(collection, outcome)
            else:
                outcome = _ChunkOutcome(batch_index, keys, records=result)
            outcomes.append(outcome)

        failed = sum(1 for outcome in outcomes if outcome.failed)
        logger.debug(
            f"{__name__}:fetch - END collection={collection}, "
            f"found={sum(len(o.records) for o in outcomes)}, failed_batches={failed}"
        )
        return outcomes

    async def _fetch_chunk(self, collection: str, keys: list[str]) -> dict[str, Record]:
        lookup = self.store.fetch_by_keys_in(collection, keys)
        if self.chunk_timeout is not None:
            raw_documents = await asyncio.wait_for(lookup, self.chunk_timeout)
        else:
            raw_documents = await lookup

        requested = set(keys)
        records: dict[str, Record] = {}
        for doc_id, fields in raw_documents:
            if doc_id not in requested:
                logger.warning(
                    f"{__name__}:fetch - Dropping unrequested key from store",
                    extra={"collection": collection, "doc_id": doc_id},
                )
                continue
            records[doc_id] = build_record(doc_id, fields)
        return records

    def _report_failure(self, collection: str, outcome: _ChunkOutcome) -> None:
        context = BatchErrorContext(
            collection=collection,
            batch_index=outcome.batch_index,
            batch_size=len(outcome.keys),
        )
        try:
            self._on_batch_error(context, outcome.error)
        except Exception:
            logger.exception(
                f"{__name__}:fetch - Batch error hook raised",
                extra={"collection": collection, "batch_index": outcome.batch_index},
            )

    @staticmethod
    def _merge(outcomes: list[_ChunkOutcome]) -> dict[str, Record]:
        # Chunk key sets are disjoint, so a plain fold cannot collide.
        merged: dict[str, Record] = {}
        for outcome in outcomes:
            if not outcome.failed:
                merged.update(outcome.records)
        return merged


async def batch_fetch_documents(
    store: DocumentStore,
    collection: str,
    ids: Iterable[str],
    batch_size: int = DEFAULT_BATCH_SIZE,
    on_batch_error: BatchErrorHook = log_batch_error,
) -> dict[str, Record]:
    """
    Fetch documents by id in chunks of `batch_size`.

    Functional form of BatchFetcher.fetch.

    Args:
        store: Store providing fetch_by_keys_in
        collection: Collection name
        ids: Document ids, duplicates allowed
        batch_size: Maximum keys per lookup
        on_batch_error: Hook called once per failed chunk

    Returns:
        dict[str, Record]: Records keyed by id

    Usage:
        products = await batch_fetch_documents(store, "products", product_ids)
        ordered = map_to_ordered_list(products, product_ids)
    """
    fetcher = BatchFetcher(store, batch_size=batch_size, on_batch_error=on_batch_error)
    return await fetcher.fetch(collection, ids)
