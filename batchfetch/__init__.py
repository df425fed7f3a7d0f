"""
Batch document fetching for key/value document collections.

Resolves large, possibly duplicated identifier lists into documents while
respecting the store's per-query key limit.
"""

from batchfetch.core.batch_fetcher import BatchFetcher, batch_fetch_documents
from batchfetch.core.chunking import chunk_items, dedupe_ids
from batchfetch.core.ordering import map_to_ordered_list

__all__ = [
    "BatchFetcher",
    "batch_fetch_documents",
    "chunk_items",
    "dedupe_ids",
    "map_to_ordered_list",
]

__version__ = "0.1.0"
