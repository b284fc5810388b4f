"""Async database engine and session factory for snapshot storage."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..models import Base


def build_engine(database_url: str) -> AsyncEngine:
    """Create an async engine; SQLite connections may be shared across threads."""

    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite+") else {}
    return create_async_engine(database_url, future=True, echo=False, connect_args=connect_args)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """Ensure the snapshot table exists."""

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
