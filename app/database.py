"""
Database configuration and session management.

This module contains the Database handle wrapping the SQLAlchemy async engine
and session factory, plus the request-scoped session dependency.

The handle is opened once at application startup (see the lifespan in
app.main), kept on ``app.state.db`` and disposed at shutdown.
"""

from datetime import datetime
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Base class for all database models
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """Turn on FK enforcement so ON DELETE CASCADE applies on SQLite."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Storage handle for the application.

    Owns the async engine and the session factory. Create one per process
    and call ``dispose()`` on shutdown.
    """

    def __init__(self, url: str, *, echo: bool = False):
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)

        engine_kwargs = {}
        if url.startswith("sqlite") and ":memory:" in url:
            # One shared connection keeps the in-memory database alive
            engine_kwargs["poolclass"] = StaticPool

        self.url = url
        self.engine = create_async_engine(url, echo=echo, future=True, **engine_kwargs)

        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    async def create_tables(self) -> None:
        """Create all tables registered on Base.metadata."""
        import app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def server_time(self) -> datetime:
        """Round-trip to the database and return its current timestamp."""
        async with self.engine.connect() as conn:
            result = await conn.execute(text("SELECT CURRENT_TIMESTAMP"))
            value = result.scalar_one()
        if isinstance(value, str):
            # SQLite returns text
            value = datetime.fromisoformat(value)
        return value

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency function to get database session.

    Yields an async database session bound to the application's Database
    handle and ensures proper cleanup.
    """
    database: Database = request.app.state.db

    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
