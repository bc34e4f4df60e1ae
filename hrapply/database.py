"""
Database connection and session management
Handles the SQLAlchemy async engine, session factory, and table creation
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

logger = structlog.get_logger()

# Create the declarative base for models
Base = declarative_base()


def get_database_url(url: str) -> str:
    """
    Get database URL with an async-capable driver

    Args:
        url: Configured database URL

    Returns:
        str: Database URL with correct driver
    """
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("sqlite://"):
        url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def _hide_credentials(url: str) -> str:
    return url.split("@")[-1] if "@" in url else url


class Database:
    """
    Owns the async engine and session factory for one application instance
    """

    def __init__(self, url: str, pool_size: int = 10, max_overflow: int = 20, echo: bool = False):
        self.url = get_database_url(url)
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_maker: Optional[async_sessionmaker] = None

    def connect(self):
        """Create the engine and session maker if they do not exist yet"""
        if self.engine is not None:
            return

        # Configure engine parameters based on database type
        engine_kwargs = {
            "echo": self.echo,
        }

        if "sqlite" in self.url:
            # SQLite-specific configuration
            engine_kwargs.update({
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False}
            })
        else:
            # PostgreSQL-specific configuration
            engine_kwargs.update({
                "pool_size": self.pool_size,
                "max_overflow": self.max_overflow,
                "pool_pre_ping": True
            })

        try:
            self.engine = create_async_engine(self.url, **engine_kwargs)
            self.session_maker = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
            )
        except Exception as e:
            logger.error("Failed to create database engine", error=str(e))
            raise

        logger.info(
            "Database engine created successfully",
            url=_hide_credentials(self.url),
            pool_size=self.pool_size,
            max_overflow=self.max_overflow
        )

    async def create_tables(self):
        """
        Create all database tables
        Used during application startup
        """
        self.connect()

        # Import models to ensure they're registered
        from hrapply.models.database import Application  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except Exception as e:
            logger.error("Failed to create database tables", error=str(e))
            raise

        logger.info("Database tables created/verified successfully")

    async def check_connection(self) -> bool:
        """
        Check if database connection is working

        Returns:
            bool: True if connection is successful
        """
        self.connect()

        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error("Database connection check failed", error=str(e))
            return False

        return True

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager for database sessions
        Callers commit their own writes; errors roll back

        Yields:
            AsyncSession: Database session
        """
        self.connect()

        async with self.session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def dispose(self):
        """
        Close all database connections
        Used during application shutdown
        """
        if self.engine is None:
            return

        try:
            await self.engine.dispose()
            logger.info("Database engine disposed")
        except Exception as e:
            logger.error("Error closing database connections", error=str(e))
        finally:
            self.engine = None
            self.session_maker = None
