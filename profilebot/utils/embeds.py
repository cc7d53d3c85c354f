"""
Shared embed utilities for the profile bot.

Turns header slot state into Discord embeds so commands and views render
profiles the same way.
"""

import discord

from profilebot.constants import UIConstants
from profilebot.data_models.header import HeaderSnapshot


def build_header_embed(snapshot: HeaderSnapshot) -> discord.Embed:
    """
    Build the profile header embed.

    Layout:
    - Title: username, linking to the external profile
    - Thumbnail: avatar (placeholder image when no user is shown)
    - Description: user title, flag and country, supporter hearts
    - One inline field per statistics line; none when statistics are absent

    Args:
        snapshot: Current slot values of a TopHeader

    Returns:
        Formatted Discord embed ready for display
    """
    embed = discord.Embed(
        title=snapshot.username or UIConstants.UNKNOWN_USER_TITLE,
        url=snapshot.profile_link,
        color=discord.Colour(snapshot.title_colour)
    )

    embed.set_thumbnail(url=snapshot.avatar_url)

    description_lines = []
    if snapshot.title:
        description_lines.append(f"*{snapshot.title}*")

    country_line = snapshot.country_text
    if snapshot.flag:
        country_line = f"{snapshot.flag} {country_line}"
    description_lines.append(country_line)

    if snapshot.support_level > 0:
        description_lines.append(UIConstants.SUPPORTER_HEART * snapshot.support_level)

    embed.description = "\n".join(description_lines)

    for line in snapshot.stats:
        embed.add_field(name=line.label, value=line.value, inline=True)

    return embed
