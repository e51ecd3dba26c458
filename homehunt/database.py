"""
Database engine and session management.
The engine is a process-scoped resource owned by DatabaseManager: created at
application startup, health-checked, and disposed at shutdown.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import text, DateTime, Uuid, func
from sqlalchemy.pool import StaticPool
from fastapi import Request
from typing import AsyncGenerator, AsyncIterator, Optional
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import uuid

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Includes common fields: id, created_at, updated_at.
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class DatabaseManager:
    """
    Owns the async engine and session factory for the lifetime of the process.
    """

    def __init__(self):
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    @property
    def is_initialized(self) -> bool:
        return self.engine is not None

    def init(self, database_url: str, echo: bool = False) -> None:
        """
        Create the engine and session factory.

        Args:
            database_url: SQLAlchemy async database URL
            echo: Whether to log emitted SQL
        """
        if self.is_initialized:
            raise RuntimeError("Database manager is already initialized")

        engine_kwargs = {"echo": echo, "pool_pre_ping": True}
        if database_url.startswith("sqlite") and ":memory:" in database_url:
            # One shared connection, or every session would see its own empty database
            engine_kwargs.update(
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        elif not database_url.startswith("sqlite"):
            # Connection pool settings for a server database
            engine_kwargs.update(
                pool_size=10,
                max_overflow=20,
                pool_recycle=3600,
                pool_timeout=30,
            )

        self.engine = create_async_engine(database_url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database engine initialized")

    async def create_tables(self) -> None:
        """Create all tables known to the model metadata."""
        self._require_engine()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")

    async def ping(self) -> bool:
        """
        Test database connectivity.
        Returns True if connection is successful, False otherwise.
        """
        if not self.is_initialized:
            return False

        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(text("SELECT 1"))
                result.scalar()
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that is rolled back on error and always closed."""
        self._require_engine()
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        """Dispose the engine. Safe to call more than once."""
        if self.is_initialized:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info("Database connections closed")

    def _require_engine(self) -> None:
        if not self.is_initialized:
            raise RuntimeError("Database manager is not initialized")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get a database session from the application's manager.
    """
    manager: DatabaseManager = request.app.state.db
    async with manager.session() as session:
        yield session
