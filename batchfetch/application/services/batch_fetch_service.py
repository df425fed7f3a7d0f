"""
Batch fetch service.

Binds a BatchFetcher to the known marketplace collections so callers can
write `await service.get_products(ids)` instead of repeating collection
names.

Dependencies: batchfetch.core
System role: Named-collection convenience surface over the batch fetch core
"""

import logging
from typing import Iterable, Sequence

from batchfetch.core.batch_fetcher import BatchFetcher, Record
from batchfetch.core.collections import Collections
from batchfetch.core.exceptions import UnknownCollectionError
from batchfetch.core.ordering import map_to_ordered_list
from batchfetch.models.batch import BatchFetchReport

logger = logging.getLogger(__name__)


class BatchFetchService:
    """Batch lookups per known collection."""

    def __init__(self, fetcher: BatchFetcher) -> None:
        """
        Initialize service.

        Args:
            fetcher: Executor used for every lookup
        """
        self.fetcher = fetcher

    @staticmethod
    def resolve_collection(name: str | Collections) -> Collections:
        """
        Validate a collection name.

        Raises:
            UnknownCollectionError: If the name is not a known collection
        """
        try:
            return Collections(name)
        except ValueError as e:
            raise UnknownCollectionError(str(name)) from e

    async def get_by_collection(
        self,
        collection: str | Collections,
        ids: Iterable[str],
    ) -> dict[str, Record]:
        """
        Fetch documents from any collection by name.

        Unlike the resolve_collection check used by the HTTP layer, any
        collection name is accepted here.

        Args:
            collection: Collection name
            ids: Document ids, duplicates allowed

        Returns:
            dict[str, Record]: Records keyed by id
        """
        name = collection.value if isinstance(collection, Collections) else collection
        return await self.fetcher.fetch(name, ids)

    async def get_ordered(
        self,
        collection: str | Collections,
        ids: Sequence[str],
    ) -> list[Record | None]:
        """
        Fetch documents and return them aligned with `ids`.

        Duplicates in `ids` repeat the same record; missing or failed ids
        are None.
        """
        documents = await self.get_by_collection(collection, ids)
        return map_to_ordered_list(documents, ids)

    async def get_report(
        self,
        collection: str | Collections,
        ids: Iterable[str],
    ) -> BatchFetchReport:
        """Fetch documents with not-found and failed ids reported separately."""
        name = collection.value if isinstance(collection, Collections) else collection
        return await self.fetcher.fetch_detailed(name, ids)

    async def get_products(self, ids: Iterable[str]) -> dict[str, Record]:
        return await self.get_by_collection(Collections.PRODUCTS, ids)

    async def get_shops(self, ids: Iterable[str]) -> dict[str, Record]:
        return await self.get_by_collection(Collections.SHOPS, ids)

    async def get_categories(self, ids: Iterable[str]) -> dict[str, Record]:
        return await self.get_by_collection(Collections.CATEGORIES, ids)

    async def get_users(self, ids: Iterable[str]) -> dict[str, Record]:
        return await self.get_by_collection(Collections.USERS, ids)

    async def get_orders(self, ids: Iterable[str]) -> dict[str, Record]:
        return await self.get_by_collection(Collections.ORDERS, ids)

    async def get_auctions(self, ids: Iterable[str]) -> dict[str, Record]:
        return await self.get_by_collection(Collections.AUCTIONS, ids)

    async def get_coupons(self, ids: Iterable[str]) -> dict[str, Record]:
        return await self.get_by_collection(Collections.COUPONS, ids)
