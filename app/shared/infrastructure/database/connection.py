# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, making sure we can talk to our data storage
# and handling many connections efficiently without overwhelming the database.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy engine management with dialect-aware pooling (asyncpg for
# PostgreSQL, aiosqlite for local and test runs), health checks and schema bootstrap.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, declarative base)
# - app/shared/config/settings.py (database configuration)
# - asyncpg / aiosqlite (async drivers)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session management)
# - All module ORM models (declarative Base)
# - app/main.py lifespan and app/api/v1/health.py

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool, StaticPool

from app.shared.config.settings import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by every module's ORM models."""


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and retry on the health probe.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 0.5

    @staticmethod
    def build_engine_kwargs(settings: Settings) -> Dict[str, Any]:
        """Build SQLAlchemy engine parameters for the configured dialect."""
        url = make_url(settings.database_url)
        params: Dict[str, Any] = {"echo": settings.DB_ECHO}

        if url.get_backend_name() == "sqlite":
            params["connect_args"] = {"check_same_thread": False}
            # An in-memory database lives only as long as its single connection
            if url.database in (None, "", ":memory:"):
                params["poolclass"] = StaticPool
            else:
                params["poolclass"] = NullPool
            return params

        if settings.is_testing:
            params["poolclass"] = NullPool
        else:
            params.update({
                "pool_pre_ping": True,
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
                "pool_recycle": settings.DB_POOL_RECYCLE,
            })
        params["connect_args"] = {
            "server_settings": {
                "application_name": f"clubbera_{settings.ENVIRONMENT}",
                "jit": "off",
            },
            "command_timeout": 60,
        }
        return params

    async def initialize(self, settings: Settings) -> None:
        """Initialize database engine with connection pooling."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info("Initializing database connection pool...")
        self._engine = create_async_engine(
            settings.database_url,
            **self.build_engine_kwargs(settings),
        )
        self._register_connection_events()

        if settings.DB_CREATE_TABLES:
            await self.create_all()

        logger.info(f"✅ Database engine ready ({self._engine.dialect.name})")

    def _register_connection_events(self) -> None:
        if self._engine is None or self._engine.dialect.name != "sqlite":
            return

        @event.listens_for(self._engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            """SQLite leaves foreign keys off unless asked."""
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    async def create_all(self) -> None:
        """Create every table registered on the declarative Base."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")
        import app.shared.infrastructure.database.models  # noqa: F401  registers all tables

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("🌱 Database tables created")

    async def drop_all(self) -> None:
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        timestamp = datetime.now(timezone.utc).isoformat()
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": timestamp,
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    await conn.execute(self._health_check_query)
                return {"status": "healthy", "timestamp": timestamp}
            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("❌ Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database unreachable",
            "timestamp": timestamp,
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database(settings: Settings) -> None:
    """Initialize the global database connection manager."""
    try:
        await db_manager.initialize(settings)
    except Exception as e:
        logger.error(f"❌ Database initialization failed: {e}", exc_info=True)
        raise


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return db_manager.engine
