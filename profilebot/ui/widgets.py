"""
Display slots for the profile header.

Each widget holds the projected state of one part of the header. They carry no
layout of their own; rendering to Discord happens in profilebot.utils.embeds.
"""

from typing import Optional, Tuple

from profilebot.constants import UIConstants
from profilebot.data_models.header import StatsLine
from profilebot.data_models.profile import Country, UserProfile
from profilebot.utils.flags import flag_glyph


class UpdateableAvatar:
    """Avatar image for a user, falling back to a placeholder image."""

    def __init__(self, root_url: str, placeholder_url: str):
        self.root_url = root_url.rstrip('/')
        self.placeholder_url = placeholder_url
        self._user: Optional[UserProfile] = None

    @property
    def user(self) -> Optional[UserProfile]:
        return self._user

    @user.setter
    def user(self, user: Optional[UserProfile]):
        self._user = user

    @property
    def is_placeholder(self) -> bool:
        return self._user is None

    @property
    def url(self) -> str:
        if self._user is None:
            return self.placeholder_url
        return self._user.avatar_url or f"{self.root_url}/{self._user.id}"


class UpdateableFlag:
    """Country flag glyph."""

    def __init__(self, show_placeholder_on_null: bool = False):
        self.show_placeholder_on_null = show_placeholder_on_null
        self._country: Optional[Country] = None

    @property
    def country(self) -> Optional[Country]:
        return self._country

    @country.setter
    def country(self, country: Optional[Country]):
        self._country = country

    @property
    def code(self) -> Optional[str]:
        return self._country.code if self._country else None

    @property
    def glyph(self) -> Optional[str]:
        glyph = flag_glyph(self.code)
        if glyph is None and self.show_placeholder_on_null:
            return UIConstants.UNKNOWN_FLAG
        return glyph


class SpriteText:
    """A line of text with a colour."""

    def __init__(self, text: str = "", colour: int = 0xffffff):
        self.text = text
        self.colour = colour


class ExternalLinkButton:
    """Button that opens a link outside the bot."""

    def __init__(self, link: Optional[str] = None):
        self.link = link


class SupporterIcon:
    """Supporter tag; one heart per support level, hidden for non-supporters."""

    def __init__(self):
        self._support_level = 0

    @property
    def support_level(self) -> int:
        return self._support_level

    @support_level.setter
    def support_level(self, level: int):
        self._support_level = max(0, int(level or 0))

    @property
    def is_supporter(self) -> bool:
        return self._support_level > 0

    @property
    def hearts(self) -> str:
        return UIConstants.SUPPORTER_HEART * self._support_level


class StatsFlow:
    """Vertical list of statistics lines."""

    def __init__(self):
        self._lines = []

    def clear(self):
        self._lines.clear()

    def add(self, line: StatsLine):
        self._lines.append(line)

    @property
    def lines(self) -> Tuple[StatsLine, ...]:
        return tuple(self._lines)

    def __len__(self):
        return len(self._lines)
