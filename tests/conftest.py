"""
BookStore API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock async database session (no real DB needed)
    ├── test_settings:   Settings pointing at a fresh SQLite file in tmp_path
    ├── test_app:        App built from test_settings
    └── test_client:     HTTPX AsyncClient with the app's lifespan running
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must be set BEFORE any app import: bookstore_api.main builds a module-level
# app from the environment, and PORT / DATABASE_URL have no defaults.
os.environ["PORT"] = "8000"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from bookstore_api.config import Settings  # noqa: E402
from bookstore_api.main import create_app  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.get.return_value = record
            result = await service.get_record(mock_db_session, str(record.id))
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock(return_value=None)
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def test_settings(tmp_path):
    """Settings backed by a throwaway SQLite database file."""
    return Settings(
        port=8000,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        log_level="WARNING",
        _env_file=None,
    )


@pytest.fixture
def test_app(test_settings):
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run lifespan events, so the lifespan context is
    entered explicitly: tables exist before the first request and the engine
    is disposed afterwards.
    """
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def dune():
    return {"Title": "Dune", "Author": "Herbert", "Pages": 412}
