"""
Profile header panel.

TopHeader keeps a set of display slots in sync with a bindable user profile.
ProfileHeaderView wraps it in Discord UI components (external link and
refresh buttons) for the /profile command.
"""

import logging
from typing import Optional

import discord
from discord.ui import View, Button

from profilebot.config import HeaderConfig
from profilebot.constants import HeaderConstants, UIConstants
from profilebot.data_models.header import HeaderSnapshot, StatsLine
from profilebot.data_models.profile import UserProfile
from profilebot.ui.widgets import (
    ExternalLinkButton, SpriteText, StatsFlow, SupporterIcon, UpdateableAvatar, UpdateableFlag
)
from profilebot.utils.bindable import Bindable, ValueChangedEvent
from profilebot.utils.colour import colour_from_hex
from profilebot.utils.embeds import build_header_embed
from profilebot.utils.error_embeds import ErrorEmbeds
from profilebot.utils.exceptions import InvalidColourError, ProfileException, UserNotFoundError
from profilebot.utils.formatting import format_count
from profilebot.utils.localisation import UsersStrings, localise

logger = logging.getLogger(__name__)

# Statistics rows in display order: caption id and value renderer
STATS_ROWS = (
    (UsersStrings.STATS_RANKED_SCORE, lambda s: format_count(s.ranked_score)),
    (UsersStrings.STATS_HIT_ACCURACY, lambda s: s.display_accuracy),
    (UsersStrings.STATS_PLAY_COUNT, lambda s: format_count(s.play_count)),
    (UsersStrings.STATS_TOTAL_SCORE, lambda s: format_count(s.total_score)),
    (UsersStrings.STATS_TOTAL_HITS, lambda s: format_count(s.total_hits)),
    (UsersStrings.STATS_MAXIMUM_COMBO, lambda s: format_count(s.max_combo)),
    (UsersStrings.STATS_REPLAYS_WATCHED_BY_OTHERS, lambda s: format_count(s.replays_watched)),
)

_DEFAULT_TITLE_COLOUR = colour_from_hex(HeaderConstants.DEFAULT_TITLE_COLOUR_HEX).value


class TopHeader:
    """Top section of a user profile: avatar, name, title, country, supporter tag and stats."""

    def __init__(self, config: Optional[HeaderConfig] = None):
        self.config = config or HeaderConfig()
        self.user: Bindable[UserProfile] = Bindable()

        self.avatar = UpdateableAvatar(self.config.avatar_root_url, self.config.avatar_placeholder_url)
        self.username_text = SpriteText()
        self.open_user_externally = ExternalLinkButton()
        self.user_flag = UpdateableFlag(show_placeholder_on_null=False)
        self.user_country_text = SpriteText(colour=self.config.accent_colour)
        self.supporter_tag = SupporterIcon()
        self.title_text = SpriteText()
        self.user_stats = StatsFlow()

        self._subscription = self.user.on_change(self._on_user_changed, run_once_immediately=True)

    def set_user(self, user: Optional[UserProfile]):
        """Show a different user (or none). Slots are updated before this returns."""
        self.user.value = user

    def close(self):
        """Stop following the bound user."""
        self._subscription.close()
        self.user.unbind_all()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def _on_user_changed(self, event: ValueChangedEvent):
        self._update_user(event.new_value)

    def _update_user(self, user: Optional[UserProfile]):
        logger.debug(f"Projecting profile header for user {user.id if user else None}")
        locale = self.config.locale

        self.avatar.user = user
        self.username_text.text = (user.username if user else None) or ""
        self.open_user_externally.link = (
            f"{self.config.website_root_url}/users/{user.id if user else HeaderConstants.NO_USER_ID}"
        )
        country = user.country if user else None
        self.user_flag.country = country
        self.user_country_text.text = (
            (country.full_name if country else None) or localise(UsersStrings.UNKNOWN_COUNTRY, locale)
        )
        self.supporter_tag.support_level = (user.support_level if user else 0) or 0
        self.title_text.text = (user.title if user else None) or ""
        self.title_text.colour = self._title_colour(user.colour if user else None)

        self.user_stats.clear()

        statistics = user.statistics if user else None
        if statistics is not None:
            for caption, render in STATS_ROWS:
                self.user_stats.add(StatsLine(localise(caption, locale), render(statistics)))

    def _title_colour(self, hex_colour: Optional[str]) -> int:
        if not hex_colour:
            return _DEFAULT_TITLE_COLOUR
        try:
            return colour_from_hex(hex_colour).value
        except InvalidColourError:
            logger.warning(f"Unparseable title colour {hex_colour!r}, using default")
            return _DEFAULT_TITLE_COLOUR

    def snapshot(self) -> HeaderSnapshot:
        """Current value of every slot."""
        return HeaderSnapshot(
            avatar_url=self.avatar.url,
            avatar_is_placeholder=self.avatar.is_placeholder,
            username=self.username_text.text,
            profile_link=self.open_user_externally.link,
            flag=self.user_flag.glyph,
            country_code=self.user_flag.code,
            country_text=self.user_country_text.text,
            support_level=self.supporter_tag.support_level,
            title=self.title_text.text,
            title_colour=self.title_text.colour,
            stats=self.user_stats.lines,
        )

    def to_embed(self) -> discord.Embed:
        return build_header_embed(self.snapshot())


class ProfileHeaderView(View):
    """Interactive wrapper around a TopHeader with link and refresh buttons."""

    def __init__(self, header: TopHeader, profile_source, *, timeout: int = UIConstants.VIEW_TIMEOUT):
        super().__init__(timeout=timeout)
        self.header = header
        self.profile_source = profile_source
        locale = header.config.locale

        self.link_button = Button(
            label=localise(UsersStrings.OPEN_PROFILE, locale),
            emoji=UIConstants.LINK_EMOJI,
            style=discord.ButtonStyle.link,
            url=header.open_user_externally.link
        )
        self.add_item(self.link_button)

        refresh_btn = Button(
            label=localise(UsersStrings.REFRESH, locale),
            emoji=UIConstants.REFRESH_EMOJI,
            style=discord.ButtonStyle.secondary
        )
        refresh_btn.callback = self._refresh_callback
        self.add_item(refresh_btn)

        # Registered after the header's own callback, so the link slot is already updated
        self._link_subscription = header.user.on_change(self._sync_link)

    def _sync_link(self, event: ValueChangedEvent = None):
        self.link_button.url = self.header.open_user_externally.link

    async def _refresh_callback(self, interaction: discord.Interaction):
        """Reload the profile; the header re-projects through its binding."""
        await interaction.response.defer()

        try:
            await self.profile_source.refresh()
        except UserNotFoundError as e:
            logger.info(f"Profile {e.user_id} disappeared during refresh")
            await interaction.followup.send(embed=ErrorEmbeds.from_exception(e), ephemeral=True)
        except ProfileException as e:
            logger.error(f"Error refreshing profile header: {e}")
            await interaction.followup.send(embed=ErrorEmbeds.from_exception(e), ephemeral=True)
            return

        await interaction.followup.edit_message(
            message_id=interaction.message.id,
            embed=self.header.to_embed(),
            view=self
        )

    async def on_timeout(self):
        self._link_subscription.close()
        self.header.close()
