from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool, StaticPool

from todo_app.core.config import settings
from todo_app.core.logger import get_logger


logger = get_logger(__name__)

Base = declarative_base()


def _is_in_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given URL.

    An in-memory SQLite database only lives as long as its connection, so
    every session must share a single one.
    """
    if _is_in_memory_sqlite(database_url):
        return create_async_engine(
            database_url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(
        database_url,
        echo=echo,
        poolclass=NullPool,  # Use NullPool for async
    )


class DatabaseManager:
    """Manages database connections and lifecycle."""

    def __init__(self, database_url: Optional[str] = None, echo: Optional[bool] = None):
        self.database_url = database_url or settings.database_url
        if echo is None:
            echo = settings.database_echo
        self.engine = build_engine(self.database_url, echo=echo)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get an async database session.

        Commits when the block exits cleanly, rolls back and re-raises otherwise.
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                logger.warning("Rolling back database session")
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_tables(self) -> None:
        """Create all database tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        """Drop all database tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def close(self) -> None:
        """Close the database engine."""
        await self.engine.dispose()


# Global database manager instance
db_manager = DatabaseManager()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the global manager for dependency-injected callers."""
    async with db_manager.get_session() as session:
        yield session
