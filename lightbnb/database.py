"""
Database engine and session management for PostgreSQL.
Builds the pooled async engine and the session factory injected into the query service.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool
from sqlalchemy import event, text, Integer
from lightbnb.config import Settings, get_settings
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every LightBnB table uses a serial integer primary key.
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


def create_database_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """
    Create the async engine and its connection pool.

    Args:
        settings: Settings to read the URL and pool tuning from; defaults to the cached settings

    Returns:
        AsyncEngine owning the connection pool
    """
    settings = settings or get_settings()

    if settings.is_sqlite:
        # A single shared connection keeps in-memory databases alive across sessions
        engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False}
        )

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    else:
        engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,
            pool_size=settings.pool_size,  # Number of connections to maintain in the pool
            max_overflow=settings.max_overflow,  # Additional connections that can be created on demand
            pool_pre_ping=True,  # Validate connections before use
            pool_recycle=settings.pool_recycle,
            pool_timeout=settings.pool_timeout,
            connect_args={
                "server_settings": {
                    "application_name": "lightbnb",
                }
            }
        )

    logger.info(f"Created database engine for {engine.url.render_as_string(hide_password=True)}")
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the async session factory bound to an engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def check_database_connection(engine: AsyncEngine) -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            result.scalar()
            logger.info("Database connection successful")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables from the model metadata.
    Intended for development databases and tests.
    """
    # Register every model on Base.metadata
    import lightbnb.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")


async def drop_tables(engine: AsyncEngine, settings: Optional[Settings] = None) -> None:
    """
    Drop all database tables.
    This should only be used in testing or development.
    """
    settings = settings or get_settings()
    if settings.is_production:
        raise RuntimeError("Cannot drop tables in production environment")

    import lightbnb.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")


async def close_db_connection(engine: AsyncEngine) -> None:
    """
    Dispose of the engine and its pooled connections.
    This should be called during application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")
