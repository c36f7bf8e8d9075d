"""
BookStore API — Database Handle & Session Management
=====================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI session dependency.
Why:   Centralizes all database connection logic in one place.
How:   A `Database` object owns the engine for the lifetime of the application.
       It is constructed by the app factory, opened in the lifespan startup
       and disposed at shutdown. Route handlers receive one session per request
       through `get_db_session`.
Who:   Used by the application lifespan, the health route and record routes.

Lifecycle:
    create_app()  → Database(settings)          (engine built, nothing connected)
    startup       → await database.connect()    (connectivity check + create tables)
    per request   → async with database.session()
    shutdown      → await database.dispose()    (close all pooled connections)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from bookstore_api.config import Settings

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every record model registers its table on this metadata; `connect()`
    creates missing tables from it at startup.
    """
    pass


class Database:
    """
    Process-wide database handle.

    Attributes:
        engine:          AsyncEngine managing the connection pool
        session_factory: async_sessionmaker producing per-request sessions
    """

    def __init__(self, settings: Settings):
        self.engine: AsyncEngine = create_async_engine(
            settings.database_url,
            **settings.engine_options(),
        )
        # expire_on_commit=False: attributes stay readable after commit,
        # which the response serialization relies on
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def connect(self) -> None:
        """
        Verifies connectivity and creates missing tables.

        Raises whatever the driver raises on failure; the lifespan handler
        logs it and aborts startup.
        """
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Connected to database")

    async def ping(self) -> bool:
        """Lightweight connectivity probe used by the health check."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False
        return True

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yields a session and guarantees rollback on error and close afterwards.

        Commits are issued explicitly by the record service so that a failed
        commit can still be reported to the client as a 400.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        """Gracefully closes all connections in the pool."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Example usage in a route:
        @router.get("/")
        async def list_records(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
