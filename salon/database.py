from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from salon.config import settings


def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Create the async engine for the salon database.

    SQLite connections are shared across the event loop's threads; server
    databases get pre-ping so stale pooled connections are replaced.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)
    # echo stays off, SQL logging is too verbose for development
    return create_async_engine(database_url, echo=False, **kwargs)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Records are returned to routes after commit, so keep attributes loaded
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(settings.database_url)
AsyncSessionLocal = build_session_factory(engine)


class Base(DeclarativeBase):
    """Base class for salon models."""
    pass


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
) -> AsyncIterator[AsyncSession]:
    """One unit of work: commit on success, roll back on any error."""
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dependency to get database session."""
    async with session_scope() as session:
        yield session


async def init_db():
    """Create the users, services and appointments tables."""
    import salon.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db():
    await engine.dispose()
