# goevergreen/database/connection.py
import asyncio
import asyncpg
from typing import Optional
import logging

from goevergreen.config import settings

logger = logging.getLogger(__name__)

class DatabaseUnavailableError(RuntimeError):
    """Raised when no connection pool can be provided"""

class DatabaseConnection:
    _pool: Optional[asyncpg.Pool] = None
    _lock: Optional[asyncio.Lock] = None

    @classmethod
    def _creation_lock(cls) -> asyncio.Lock:
        if cls._lock is None:
            cls._lock = asyncio.Lock()
        return cls._lock

    @classmethod
    async def get_pool(cls) -> asyncpg.Pool:
        """Get or create database connection pool"""
        if cls._pool is not None:
            return cls._pool

        db_url = settings.database_url
        if not db_url:
            raise DatabaseUnavailableError("DATABASE_URL is not configured")

        # Concurrent first callers share one pool
        async with cls._creation_lock():
            if cls._pool is None:
                try:
                    cls._pool = await asyncpg.create_pool(
                        db_url,
                        min_size=settings.db_pool_min_size,
                        max_size=settings.db_pool_max_size,
                        command_timeout=60
                    )
                    logger.info("Database connection pool created")
                except Exception as e:
                    logger.error(f"Failed to create database pool: {e}")
                    raise DatabaseUnavailableError(str(e)) from e
        return cls._pool

    @classmethod
    async def close_pool(cls):
        """Close database connection pool"""
        if cls._pool:
            await cls._pool.close()
            cls._pool = None
            logger.info("Database connection pool closed")

async def get_db_connection():
    """Get database connection from pool"""
    pool = await DatabaseConnection.get_pool()
    return await pool.acquire()

async def release_db_connection(connection):
    """Release database connection back to pool"""
    pool = await DatabaseConnection.get_pool()
    await pool.release(connection)
