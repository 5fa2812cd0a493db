"""
Database Connection Pool Management
====================================

Async connection pool management using SQLAlchemy AsyncIO with asyncpg.
Provides session management, schema bootstrap and health checks.
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from catalog.config.settings import Settings, get_settings
from catalog.db.models import Base
from catalog.utils.errors import ConfigurationError, DatabaseError
from catalog.utils.logger import get_logger

logger = get_logger(__name__)


ASYNC_DRIVER = "postgresql+asyncpg"


def _check_database_url(database_url: str) -> None:
    """Reject URLs the async engine cannot use."""
    try:
        url = make_url(database_url)
    except ArgumentError as e:
        raise ConfigurationError(
            message="Invalid DATABASE_URL",
            details={"error": str(e)},
        ) from e

    if url.drivername != ASYNC_DRIVER:
        raise ConfigurationError(
            message="DATABASE_URL must use the asyncpg driver",
            details={"driver": url.drivername, "expected": ASYNC_DRIVER},
        )


class DatabaseManager:
    """
    Manages async database connections with connection pooling.

    Features:
        - AsyncIO connection pool with asyncpg
        - Idempotent schema creation
        - Health check functionality
        - Session lifecycle management
    """

    _instance: "DatabaseManager | None" = None
    _engine: AsyncEngine | None = None
    _session_factory: async_sessionmaker[AsyncSession] | None = None

    def __new__(cls) -> "DatabaseManager":
        """Singleton pattern to ensure single database manager."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    async def initialize(cls, settings: Settings | None = None) -> "DatabaseManager":
        """
        Initialize the database connection pool.

        Args:
            settings: Application settings (uses default if not provided)

        Returns:
            DatabaseManager instance

        Raises:
            ConfigurationError: If database_url is not an asyncpg PostgreSQL URL
            DatabaseError: If connection initialization fails
        """
        instance = cls()

        if instance._engine is not None:
            logger.debug("Database already initialized, reusing connection pool")
            return instance

        settings = settings or get_settings()
        _check_database_url(settings.database_url)

        try:
            logger.info(
                "Initializing database connection pool",
                pool_min=settings.db_pool_min,
                pool_max=settings.db_pool_max,
            )

            instance._engine = create_async_engine(
                settings.database_url,
                echo=False,
                pool_size=settings.db_pool_min,
                max_overflow=max(settings.db_pool_max - settings.db_pool_min, 0),
                pool_recycle=3600,
                pool_pre_ping=True,
            )

            instance._session_factory = async_sessionmaker(
                instance._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            logger.info("Database connection pool initialized successfully")
            return instance

        except Exception as e:
            logger.error("Failed to initialize database", error=str(e))
            raise DatabaseError(
                message="Database initialization failed",
                details={"error": str(e)},
            ) from e

    @classmethod
    async def close(cls) -> None:
        """
        Close the database connection pool.

        Should be called during application shutdown.
        """
        instance = cls._instance

        if instance is None or instance._engine is None:
            logger.debug("Database not initialized, nothing to close")
            return

        try:
            logger.info("Closing database connection pool")
            await instance._engine.dispose()
            instance._engine = None
            instance._session_factory = None
            cls._instance = None
            logger.info("Database connection pool closed")
        except Exception as e:
            logger.error("Error closing database connection pool", error=str(e))
            raise DatabaseError(
                message="Failed to close database connection",
                details={"error": str(e)},
            ) from e

    @classmethod
    def get_engine(cls) -> AsyncEngine:
        """
        Get the async engine instance.

        Raises:
            DatabaseError: If database is not initialized
        """
        instance = cls._instance

        if instance is None or instance._engine is None:
            raise DatabaseError(
                message="Database not initialized",
                details={"hint": "Call DatabaseManager.initialize() first"},
            )

        return instance._engine

    @classmethod
    async def create_schema(cls) -> None:
        """
        Create any missing tables.

        Safe to run repeatedly: existing tables are left untouched.
        """
        engine = cls.get_engine()

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database schema ensured", tables=sorted(Base.metadata.tables))

    @classmethod
    @asynccontextmanager
    async def get_session(cls) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session.

        Yields:
            AsyncSession instance with automatic cleanup

        Raises:
            DatabaseError: If database is not initialized

        Usage:
            async with DatabaseManager.get_session() as session:
                result = await session.execute(...)
        """
        instance = cls._instance

        if instance is None or instance._session_factory is None:
            raise DatabaseError(
                message="Database not initialized",
                details={"hint": "Call DatabaseManager.initialize() first"},
            )

        async with instance._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                await session.rollback()
                logger.error("Database session error, rolled back", error=str(e))
                raise

    @classmethod
    async def health_check(cls) -> dict:
        """
        Check database connection health.

        Usage:
            status = await DatabaseManager.health_check()
            # {"status": "healthy", "latency_ms": 5.2}
        """
        instance = cls._instance

        if instance is None or instance._engine is None:
            return {"status": "not_initialized", "error": "Database not initialized"}

        start = time.perf_counter()

        try:
            async with instance._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

            latency = (time.perf_counter() - start) * 1000

            return {
                "status": "healthy",
                "latency_ms": round(latency, 2),
            }

        except Exception as e:
            return {
                "status": "unhealthy",
                "error": str(e),
            }


async def init_database(settings: Settings | None = None) -> DatabaseManager:
    """Initialize database connection pool."""
    return await DatabaseManager.initialize(settings)


async def close_database() -> None:
    """Close database connection pool."""
    await DatabaseManager.close()


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get async database session."""
    async with DatabaseManager.get_session() as session:
        yield session


async def health_check() -> dict:
    """Check database health."""
    return await DatabaseManager.health_check()
