"""
User profile data models.

Immutable data transfer objects describing a user profile as handed to the
profile header. Everything except the id may be missing.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Country:
    """Country a user represents."""
    code: str       # ISO 3166-1 alpha-2, e.g. "AU"
    full_name: str


@dataclass(frozen=True)
class UserStatistics:
    """Aggregate play statistics for a user."""
    ranked_score: int
    display_accuracy: str  # Already formatted, e.g. "98.76%"
    play_count: int
    total_score: int
    total_hits: int
    max_combo: int
    replays_watched: int  # Replays of this user watched by others


@dataclass(frozen=True)
class UserProfile:
    """Complete profile data for the header panel."""
    # Identity
    id: int
    username: Optional[str] = None
    profile_slug: Optional[str] = None

    # Presentation
    title: Optional[str] = None
    colour: Optional[str] = None  # Hex accent for the title, e.g. "#ff66aa"
    country: Optional[Country] = None
    avatar_url: Optional[str] = None

    # Supporter tag level (0 = not a supporter)
    support_level: int = 0

    statistics: Optional[UserStatistics] = None
