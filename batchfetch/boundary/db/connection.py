"""
Database connection management.

Provides the async SQLAlchemy engine and session factory used by the
SQL document store.

Dependencies: sqlalchemy, batchfetch.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import AsyncAdaptedQueuePool

from batchfetch.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling.

    Configures AsyncAdaptedQueuePool for connection reuse across the
    concurrent chunk lookups. pool_pre_ping=True verifies connections
    before use to detect stale/broken connections early.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine (cached)

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    db_config = get_settings().database

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    Returns async_sessionmaker bound to the shared engine with
    autoflush=False and expire_on_commit=False; the store only reads.

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            rows = await document_crud.get_by_keys_in(session, "products", ids)
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )



async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one request-scoped async session.

    Batch lookups do not use this; SqlDocumentStore opens its own session
    per chunk so chunks can run concurrently. Routes that need a single
    session for the whole request (the database readiness check) do.

    Yields:
        AsyncSession: Session closed when the request finishes

    Usage:
        @router.get("/db")
        async def check(db: AsyncSession = Depends(get_async_db)):
            await db.execute(text("SELECT 1"))
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        yield session
