"""
Database connection management for the settings seeder.

The seeder never opens transactions on its own behalf inside the insertion
helpers; this module is what the seeding runner uses to own one.
"""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

from .exceptions import DatabaseConnectionError
from .logging import get_logger

logger = get_logger(__name__)

# Create declarative base
Base = declarative_base()

# Global async engine - lazy initialization
_async_engine: AsyncEngine | None = None


def _redact(database_url: str) -> str:
    """Strip credentials from a URL before it is logged."""
    if "@" in database_url:
        scheme, _, rest = database_url.partition("://")
        return f"{scheme}://***@{rest.split('@', 1)[1]}"
    return database_url


def get_database_url() -> str:
    env_url = os.getenv("SEED_DATABASE_URL")
    if env_url:
        logger.debug("Using database URL from environment variable: %s", _redact(env_url))
        return env_url
    try:
        from .config import get_settings_instance

        return get_settings_instance().database_url
    except Exception:
        logger.error("Could not determine database URL from environment or settings", exc_info=True)
        raise DatabaseConnectionError(
            "Could not determine database URL. Please set SEED_DATABASE_URL environment variable."
        )


def to_async_url(database_url: str) -> str:
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def create_engine_for_url(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for an explicit URL (async driver selected automatically)."""
    url = to_async_url(database_url)
    logger.debug("Creating async engine: %s", _redact(url))
    try:
        return create_async_engine(url, echo=echo, future=True)
    except Exception as e:
        logger.error(f"Failed to create async database engine: {str(e)}")
        raise DatabaseConnectionError(f"engine creation: {str(e)}")


def get_async_engine() -> AsyncEngine:
    global _async_engine  # noqa: PLW0603
    if _async_engine is None:
        from .config import get_settings_instance

        echo = False
        try:
            echo = get_settings_instance().database_echo
        except Exception:
            logger.debug("Settings unavailable, engine echo disabled")
        _async_engine = create_engine_for_url(get_database_url(), echo=echo)
    return _async_engine


async def dispose_engine() -> None:
    """Dispose of the global engine, if one was created."""
    global _async_engine  # noqa: PLW0603
    if _async_engine is not None:
        await _async_engine.dispose()
        _async_engine = None


async def create_tables(connection: AsyncConnection) -> None:
    """Create every registered table that does not exist yet."""
    # Import models so Base.metadata knows about them
    from ..models import UserSetting  # noqa: F401

    await connection.run_sync(Base.metadata.create_all, checkfirst=True)


@asynccontextmanager
async def transaction(engine: AsyncEngine | None = None) -> AsyncGenerator[AsyncConnection, None]:
    """Open a connection inside a transaction that commits on success and rolls back on error.

    The yielded connection is a valid statement executor for the seeding helpers.
    """
    engine = engine or get_async_engine()
    async with engine.begin() as connection:
        yield connection
