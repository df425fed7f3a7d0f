"""
Core batch fetch engine.

Pure chunking, deduplication and projection helpers plus the concurrent
chunk executor that sits on top of a DocumentStore.
"""

from batchfetch.core.batch_fetcher import BatchFetcher, batch_fetch_documents
from batchfetch.core.chunking import chunk_items, dedupe_ids
from batchfetch.core.collections import Collections
from batchfetch.core.ordering import map_to_ordered_list
from batchfetch.core.store import DocumentStore, RawDocument

__all__ = [
    "BatchFetcher",
    "batch_fetch_documents",
    "chunk_items",
    "dedupe_ids",
    "Collections",
    "map_to_ordered_list",
    "DocumentStore",
    "RawDocument",
]
