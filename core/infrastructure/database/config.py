"""
Database configuration.

Engine and session factory creation for the SQLAlchemy storage backend.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.settings.modules.storage_settings import StorageSettings


logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(settings: StorageSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    Args:
        settings: Storage settings with database URL

    Returns:
        Configured async engine
    """
    logger.info(f"Creating database engine: {settings.database_url}")

    if settings.database_url.startswith("sqlite"):
        pool_kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in settings.database_url:
            # In-memory SQLite must share one connection across sessions
            pool_kwargs["poolclass"] = StaticPool
        return create_async_engine(settings.database_url, echo=settings.echo_sql, **pool_kwargs)

    return create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_pre_ping=True,  # Test connections before using
    )


# =============================================================================
# SESSION FACTORY
# =============================================================================

def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create session factory bound to an engine.

    Returns:
        Session factory for creating sessions
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database(engine: AsyncEngine) -> None:
    """
    Initialize database.

    Creates all tables if they don't exist.
    """
    from core.data.models import Base

    logger.info("Initializing database...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Database initialized successfully")


async def close_database(engine: AsyncEngine) -> None:
    """Close database connections."""
    logger.info("Closing database connections...")
    await engine.dispose()
    logger.info("✅ Database connections closed")
