"""
Order-preserving projection of a lookup mapping.

Dependencies: None
System role: Re-aligns batch fetch results with the caller's request order
"""

from typing import Hashable, Mapping, Sequence, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def map_to_ordered_list(
    mapping: Mapping[K, V],
    ordered_ids: Sequence[K],
) -> list[V | None]:
    """
    Project a mapping onto a list following `ordered_ids`.

    The result always has len(ordered_ids) entries. Repeated ids repeat
    the same value object; ids missing from the mapping become None.

    Args:
        mapping: Lookup table (e.g. a batch fetch result)
        ordered_ids: Desired output order, duplicates allowed

    Returns:
        list: Values (or None) positionally aligned with ordered_ids
    """
    return [mapping.get(key) for key in ordered_ids]
