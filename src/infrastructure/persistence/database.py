"""Database connection and session management.

This module provides database connection management using SQLAlchemy's
async engine and session handling. Repositories receive an ``AsyncSession``
from here (through the container).

Following hexagonal architecture:
- This is an infrastructure concern
- Provides database sessions to repository implementations
- Handles transaction boundaries

The default URL is an in-memory SQLite database (``aiosqlite`` driver). An
in-memory database lives and dies with its connection, so the engine keeps
a single shared connection (``StaticPool``) for it.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores FOREIGN KEY clauses unless asked per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Database connection and session management.

    Usage:
        db = Database("sqlite+aiosqlite:///:memory:")
        await db.create_all()
        async with db.get_session() as session:
            repo = SeatRepository(session)
            # Automatically commits on success, rolls back on error
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: Async database URL (e.g., sqlite+aiosqlite:///:memory:)
            echo: If True, log all SQL statements (useful for debugging)
        """
        is_sqlite = database_url.startswith("sqlite")
        engine_options: dict[str, Any] = {}
        if is_sqlite and ":memory:" in database_url:
            engine_options["poolclass"] = StaticPool

        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            **engine_options,
        )
        if is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Don't expire objects after commit
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional database session.

        - Commits on successful exit
        - Rolls back on exception
        - Always closes the session

        Yields:
            AsyncSession: Database session for operations
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create all tables defined in the models.

        There are no migrations: this is how the schema comes to exist.
        """
        from src.infrastructure.persistence.base import BaseModel
        from src.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables defined in the models.

        Warning: This will delete all data! Only use for testing.
        """
        from src.infrastructure.persistence.base import BaseModel
        from src.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        """Close all database connections.

        Should be called when shutting down the application.
        """
        await self.engine.dispose()
