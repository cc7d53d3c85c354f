"""
Profile service.

Loads stored user profiles and maps them to the immutable UserProfile records
the profile header consumes, with a small TTL cache in front of the database.
"""

import logging
import time
from typing import Dict, Optional

from sqlalchemy import select

from profilebot.config import Config
from profilebot.data_models.profile import Country, UserProfile, UserStatistics
from profilebot.database.models import User, UserStatisticsRow
from profilebot.services.base import BaseService
from profilebot.utils.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


def format_accuracy(hit_accuracy: float) -> str:
    """Display form of a hit accuracy percentage, e.g. 98.7612 -> '98.76%'."""
    return f"{hit_accuracy:.2f}%"


class ProfileService(BaseService):
    """Service for fetching user profiles with caching."""

    def __init__(self, session_factory, cache_ttl: Optional[int] = None, cache_max_size: int = 1000):
        super().__init__(session_factory)
        # TTL cache with size limits to prevent memory leaks
        self._cache: Dict[str, UserProfile] = {}
        self._cache_timestamps: Dict[str, float] = {}
        self._cache_ttl = Config.PROFILE_CACHE_TTL if cache_ttl is None else cache_ttl
        self._cache_max_size = cache_max_size

    async def get_profile(self, user_id: int) -> UserProfile:
        """
        Fetch a user's profile.

        Raises:
            UserNotFoundError: No profile is stored for this user
            DatabaseError: The database stayed unavailable after retries
        """
        cache_key = f"profile:{user_id}"
        if self._is_cache_valid(cache_key):
            return self._cache[cache_key]

        self._cleanup_cache()

        async def load_profile() -> Optional[UserProfile]:
            async with self.get_session() as session:
                result = await session.execute(select(User).where(User.id == user_id))
                user = result.unique().scalar_one_or_none()
                return self._to_profile(user) if user else None

        profile = await self.execute_with_retry(load_profile)
        if profile is None:
            raise UserNotFoundError(user_id)

        self._cache[cache_key] = profile
        self._cache_timestamps[cache_key] = time.time()
        logger.debug(f"Loaded profile for user {user_id}")
        return profile

    def invalidate(self, user_id: int):
        """Invalidate cache for specific user."""
        cache_key = f"profile:{user_id}"
        self._cache.pop(cache_key, None)
        self._cache_timestamps.pop(cache_key, None)

    @staticmethod
    def _to_profile(user: User) -> UserProfile:
        country = Country(code=user.country.code, full_name=user.country.name) if user.country else None
        return UserProfile(
            id=user.id,
            username=user.username,
            profile_slug=user.profile_slug,
            title=user.title,
            colour=user.colour,
            country=country,
            avatar_url=user.avatar_url,
            support_level=user.support_level or 0,
            statistics=ProfileService._to_statistics(user.statistics),
        )

    @staticmethod
    def _to_statistics(row: Optional[UserStatisticsRow]) -> Optional[UserStatistics]:
        if row is None:
            return None
        return UserStatistics(
            ranked_score=row.ranked_score or 0,
            display_accuracy=format_accuracy(row.hit_accuracy or 0.0),
            play_count=row.play_count or 0,
            total_score=row.total_score or 0,
            total_hits=row.total_hits or 0,
            max_combo=row.max_combo or 0,
            replays_watched=row.replays_watched or 0,
        )

    def _is_cache_valid(self, cache_key: str) -> bool:
        """Check if cache entry is still valid."""
        if cache_key not in self._cache_timestamps:
            return False
        return time.time() - self._cache_timestamps[cache_key] < self._cache_ttl

    def _cleanup_cache(self):
        """Remove expired cache entries and enforce size limits."""
        current_time = time.time()

        expired_keys = [
            key for key, timestamp in self._cache_timestamps.items()
            if current_time - timestamp >= self._cache_ttl
        ]
        for key in expired_keys:
            self._cache.pop(key, None)
            self._cache_timestamps.pop(key, None)

        # Drop oldest entries until there is room for one more
        while self._cache and len(self._cache) >= self._cache_max_size:
            oldest_key = min(self._cache_timestamps, key=self._cache_timestamps.get)
            self._cache.pop(oldest_key, None)
            self._cache_timestamps.pop(oldest_key, None)
