"""
Sequence chunking and identifier deduplication.

Both helpers are pure and generic; chunk_items is used for identifiers
here and for arbitrary items by callers elsewhere.

Dependencies: batchfetch.core.exceptions
System role: Leaf utilities for the batch fetch executor
"""

from typing import Hashable, Iterable, Sequence, TypeVar

from batchfetch.core.exceptions import InvalidChunkSizeError

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def chunk_items(items: Sequence[T], size: int) -> list[list[T]]:
    """
    Split a sequence into consecutive chunks of at most `size` items.

    Only the last chunk may be shorter. Empty input yields no chunks.
    Items are not inspected, so None values are carried through as-is.

    Args:
        items: Sequence to partition
        size: Maximum chunk length (must be >= 1)

    Returns:
        list[list[T]]: Chunks in original order

    Raises:
        InvalidChunkSizeError: If size is below 1

    Usage:
        chunk_items([1, 2, 3, 4, 5], 2)  # [[1, 2], [3, 4], [5]]
    """
    if size < 1:
        raise InvalidChunkSizeError(size)
    return [list(items[start:start + size]) for start in range(0, len(items), size)]


def dedupe_ids(ids: Iterable[K]) -> list[K]:
    """
    Drop repeated identifiers, keeping the first occurrence of each.

    Args:
        ids: Identifiers in request order

    Returns:
        list: Unique identifiers in first-seen order
    """
    return list(dict.fromkeys(ids))
