"""
Retrying document store wrapper.

Wraps any DocumentStore so each lookup is retried with exponential backoff
and jitter. The batch fetch executor never retries by itself; retry is
enabled only by wrapping the store.

Dependencies: tenacity
System role: Opt-in retry policy layered above the batch fetch core
"""

import logging
from typing import Sequence

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from batchfetch.core.exceptions import BatchSizeExceededError
from batchfetch.core.store import DocumentStore, RawDocument

logger = logging.getLogger(__name__)


class RetryingDocumentStore:
    """DocumentStore decorator adding tenacity retries."""

    def __init__(
        self,
        inner: DocumentStore,
        attempts: int = 3,
        initial_wait: float = 0.5,
        max_wait: float = 5.0,
    ) -> None:
        """
        Initialize retrying wrapper.

        Args:
            inner: Store to delegate to
            attempts: Total attempts per lookup (>= 1)
            initial_wait: First backoff in seconds
            max_wait: Maximum single backoff in seconds
        """
        if attempts < 1:
            raise ValueError(f"attempts must be at least 1, got {attempts}")
        self.inner = inner
        self.attempts = attempts
        self.initial_wait = initial_wait
        self.max_wait = max_wait

    async def fetch_by_keys_in(
        self,
        collection: str,
        keys: Sequence[str],
    ) -> list[RawDocument]:
        """
        Fetch documents, retrying failed attempts.

        BatchSizeExceededError is raised immediately since retrying cannot
        fix it. Cancellation (including a chunk timeout from the executor) is
        a BaseException and is re-raised without another attempt. After the
        last attempt the original exception is re-raised.
        """
        retrying = AsyncRetrying(
            retry=(
                retry_if_exception_type(Exception)
                & retry_if_not_exception_type(BatchSizeExceededError)
            ),
            stop=stop_after_attempt(self.attempts),
            wait=(
                wait_exponential(multiplier=self.initial_wait, max=self.max_wait)
                + wait_random(0, self.initial_wait)
            ),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:fetch_by_keys_in - Retry "
                f"{retry_state.attempt_number}/{self.attempts} for {collection}"
            ),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self.inner.fetch_by_keys_in(collection, keys)
