"""SQLAlchemy database session and engine configuration.

Engines are built on demand per database URL; nothing connects at import
time, so the in-memory configuration never needs a database driver.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from homekeep.infrastructure.database.base import Base


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


@lru_cache
def get_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(_get_async_url(database_url), future=True)


@lru_cache
def get_session_factory(database_url: str) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(database_url: str) -> AsyncIterator[AsyncSession]:
    """One unit of work: commit on success, roll back on any exception."""
    async with get_session_factory(database_url)() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables(database_url: str) -> None:
    """Create every table registered on ``Base`` (idempotent)."""
    from homekeep.infrastructure.database import models  # noqa: F401  (registers tables)

    async with get_engine(database_url).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(database_url: str) -> None:
    await get_engine(database_url).dispose()
    get_session_factory.cache_clear()
    get_engine.cache_clear()
