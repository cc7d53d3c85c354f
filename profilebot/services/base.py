"""
Base service class for the profile bot.

Gives services a transactional session scope and retries for transient
database failures.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable, TypeVar
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from profilebot.utils.exceptions import DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar('T')

class BaseService:
    """Base class for all services with async database session management."""

    def __init__(self, session_factory):
        """
        Args:
            session_factory: Async session factory from Database class
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional scope for async database operations."""
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def execute_with_retry(self, func: Callable[[], Awaitable[T]], max_retries: int = 3) -> T:
        """
        Run a coroutine function, retrying on operational database errors.

        Raises:
            DatabaseError: When every attempt failed
        """
        for attempt in range(max_retries):
            try:
                return await func()
            except OperationalError as e:
                if attempt == max_retries - 1:
                    raise DatabaseError(func.__name__, str(e)) from e
                logger.warning(f"Retry attempt {attempt + 1} for {func.__name__}: {e}")
                await asyncio.sleep(0.1 * (2 ** attempt))  # Exponential backoff
