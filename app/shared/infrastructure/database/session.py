# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) so each request
# gets its own clean session and every change in a request is saved together or not at all.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy session management with a FastAPI dependency. One session
# is one unit of work: repositories flush, the session commits once on success and
# rolls back on any failure, so multi-step operations are atomic.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - All module repository implementations (database sessions)
# - app/main.py lifespan (initialization)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.shared.core.exceptions import ClubberaException, DatabaseError, TransactionError
from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None

    def initialize(self) -> None:
        """Initialize the session factory with the database engine."""
        self._session_factory = async_sessionmaker(
            get_database_engine(),
            class_=AsyncSession,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=True,
        )
        logger.info("Database session factory initialized")

    def reset(self) -> None:
        self._session_factory = None

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Yields:
            AsyncSession: Database session

        Raises:
            DatabaseError: If the database rejects the unit of work
            TransactionError: If the final commit fails
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()
        try:
            yield session
        except ClubberaException:
            await session.rollback()
            raise
        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError("Database operation failed") from e
        except BaseException:
            await session.rollback()
            raise
        else:
            try:
                await session.commit()
            except exc.SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"❌ Commit failed, transaction rolled back: {e}")
                raise TransactionError("Transaction failed") from e
        finally:
            await session.close()

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None


# Global session manager instance
session_manager = DatabaseSessionManager()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides the request's unit of work.

    Usage:
        @router.post("/creategroup")
        async def create_group(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with session_manager.get_session() as session:
        yield session
