"""
Shared pytest fixtures and path setup for unit tests.
"""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock

# Set required environment variables BEFORE any settings_seed imports to prevent
# Pydantic Settings validation errors. These are test-only defaults.
os.environ.setdefault("SEED_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Add backend/src to sys.path so settings_seed.* imports work when running pytest from repo root.
PROJECT_SRC = Path(__file__).resolve().parents[2]
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from settings_seed.core.database import create_tables  # noqa: E402


@pytest.fixture
def executor():
    """A statement executor that records what it was asked to run."""
    mock = AsyncMock()
    mock.execute.return_value = None
    return mock


@pytest.fixture
async def engine():
    """In-memory SQLite engine; StaticPool keeps every connection on the same database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield engine
    await engine.dispose()


@pytest.fixture
async def connection(engine):
    """A connection to a database that already has the user_setting table."""
    async with engine.connect() as conn:
        await create_tables(conn)
        yield conn
