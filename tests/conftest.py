"""
Shared test fixtures and configuration for entire test suite.

Provides: document store mocks, an echoing store stub, a file-backed SQLite
async database, and id generators
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from typing import Sequence
from unittest.mock import AsyncMock

import pytest


def make_ids(count: int, prefix: str = "id") -> list[str]:
    """Generate `count` distinct ids: id0, id1, ..."""
    return [f"{prefix}{i}" for i in range(count)]


async def echo_documents(collection: str, keys: Sequence[str]) -> list[tuple[str, dict]]:
    """Store stub that finds every requested key."""
    return [(key, {"value": key}) for key in keys]


@pytest.fixture
def mock_store() -> AsyncMock:
    """
    Create mock DocumentStore that returns every requested key.

    Returns:
        AsyncMock: Store whose fetch_by_keys_in echoes the keys back
    """
    store = AsyncMock()
    store.fetch_by_keys_in = AsyncMock(side_effect=echo_documents)
    return store


@pytest.fixture
def batch_errors() -> list:
    """Collect (context, error) pairs passed to the batch error hook."""
    return []


@pytest.fixture
def record_batch_error(batch_errors: list):
    """Batch error hook that records instead of logging."""

    def hook(context, error) -> None:
        batch_errors.append((context, error))

    return hook


@pytest.fixture
async def test_session_factory(tmp_path):
    """
    Create file-backed SQLite async database for testing.

    A file database (rather than :memory:) lets concurrent sessions use
    separate connections, matching how chunk lookups run in production.

    Yields:
        async_sessionmaker: Session factory bound to a fresh schema
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from batchfetch.boundary.db.base import Base

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'documents.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def seeded_session_factory(test_session_factory):
    """
    Session factory over a database with 25 products and 2 users.

    products/id0..id24 have {"name": "Product idN", "position": N};
    users/u1 has a stale "id" field in its body; users/u2 has a NULL body.
    """
    from batchfetch.boundary.db.models.document_model import DocumentModel

    async with test_session_factory() as session:
        for position, doc_id in enumerate(make_ids(25)):
            session.add(
                DocumentModel(
                    collection="products",
                    doc_id=doc_id,
                    fields={"name": f"Product {doc_id}", "position": position},
                )
            )
        session.add(DocumentModel(collection="users", doc_id="u1", fields={"id": "old-id", "name": "Ada"}))
        session.add(DocumentModel(collection="users", doc_id="u2", fields=None))
        await session.commit()

    return test_session_factory
