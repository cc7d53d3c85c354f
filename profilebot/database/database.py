from typing import Optional, Dict, Any
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy import select
from contextlib import asynccontextmanager

from profilebot.config import Config
from profilebot.data_models.profile import Country as CountryData
from profilebot.database.models import Base, Country, User, UserStatisticsRow
from profilebot.utils.logger import setup_logger

class Database:
    def __init__(self, database_url: Optional[str] = None):
        self.logger = setup_logger(__name__)
        self.database_url = database_url or Config.DATABASE_URL
        self.engine = None
        self.async_session = None

    @property
    def session_factory(self):
        """Async session factory handed to services"""
        return self.async_session

    async def initialize(self):
        """Initialize the database connection and create tables"""
        self.logger.info("Initializing database...")

        # Convert sqlite URL to async if needed
        database_url = self.database_url
        if database_url.startswith('sqlite:///'):
            database_url = database_url.replace('sqlite:///', 'sqlite+aiosqlite:///')

        self.engine = create_async_engine(
            database_url,
            echo=Config.DEBUG,
            future=True
        )

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

        # Create all tables
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self.logger.info("Database initialized successfully")

    @asynccontextmanager
    async def get_session(self):
        """Get a database session"""
        async with self.async_session() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    @asynccontextmanager
    async def transaction(self):
        """
        Create a transaction boundary for atomic operations.

        All operations within the context are committed together on success,
        or rolled back together on failure. Exceptions must be allowed to
        propagate out of the context for rollback to occur.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def close(self):
        """Close the database connection"""
        if self.engine:
            await self.engine.dispose()
            self.logger.info("Database connection closed")

    # User operations
    async def get_user(self, user_id: int) -> Optional[User]:
        """Get a user with country and statistics loaded"""
        async with self.get_session() as session:
            result = await session.execute(
                select(User).where(User.id == user_id)
            )
            return result.unique().scalar_one_or_none()

    async def upsert_user(
        self,
        user_id: int,
        username: str,
        *,
        profile_slug: Optional[str] = None,
        title: Optional[str] = None,
        colour: Optional[str] = None,
        avatar_url: Optional[str] = None,
        country: Optional[CountryData] = None,
        support_level: int = 0,
        statistics: Optional[Dict[str, Any]] = None
    ) -> User:
        """
        Create or replace a stored user profile.

        Args:
            statistics: Column values for UserStatisticsRow (ranked_score,
                hit_accuracy, play_count, ...). None removes stored statistics.
        """
        async with self.transaction() as session:
            if country is not None:
                existing_country = await session.get(Country, country.code)
                if existing_country is None:
                    session.add(Country(code=country.code, name=country.full_name))
                else:
                    existing_country.name = country.full_name

            user = await session.get(User, user_id)
            if user is None:
                user = User(id=user_id)
                session.add(user)

            user.username = username
            user.profile_slug = profile_slug
            user.title = title
            user.colour = colour
            user.avatar_url = avatar_url
            user.country_code = country.code if country else None
            user.support_level = support_level

            if statistics is None:
                user.statistics = None
            elif user.statistics is None:
                user.statistics = UserStatisticsRow(**statistics)
            else:
                for column, value in statistics.items():
                    setattr(user.statistics, column, value)

        self.logger.debug(f"Stored profile for user {user_id}")
        return user
