"""
Header data models.

Immutable snapshot of what the profile header currently displays.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StatsLine:
    """Single statistics row: caption on the left, value on the right."""
    label: str
    value: str


@dataclass(frozen=True)
class HeaderSnapshot:
    """Current value of every slot in the profile header."""
    avatar_url: str
    avatar_is_placeholder: bool
    username: str
    profile_link: str
    flag: Optional[str]          # Flag glyph, None when no flag is shown
    country_code: Optional[str]
    country_text: str
    support_level: int
    title: str
    title_colour: int            # 0xRRGGBB
    stats: Tuple[StatsLine, ...]
