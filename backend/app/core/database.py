"""
Database Connection Management

The engine is created once on startup (see app.main lifespan) and handed to
request handlers as a transaction-scoped AsyncConnection. Repositories receive
that connection explicitly and never reach for a global handle.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.logging import logger


class Base(DeclarativeBase):
    """Declarative base for all ORM models"""
    pass


class DatabaseManager:
    """Owns the async engine and hands out transactional connections"""

    def __init__(self, database_url: str, pool_size: int = 10, max_overflow: int = 5):
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        )

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[AsyncConnection, None]:
        """Connection wrapped in a transaction: commit on success, rollback on error"""
        async with self.engine.connect() as conn:
            trans = await conn.begin()
            try:
                yield conn
            except Exception:
                await trans.rollback()
                raise
            else:
                await trans.commit()

    async def create_tables(self) -> None:
        """Create any missing tables from the ORM metadata"""
        from app import models  # noqa: F401  registers tables on Base.metadata

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def health_check(self) -> bool:
        """Check database connectivity"""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Initialized on startup
db_manager: Optional[DatabaseManager] = None


def init_db(database_url: str, **kwargs) -> DatabaseManager:
    """Create the process-wide DatabaseManager"""
    global db_manager
    db_manager = DatabaseManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncConnection, None]:
    """Get database connection"""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.connection() as conn:
        yield conn
