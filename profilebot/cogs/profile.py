"""
Profile commands.

/profile shows the header panel for a stored user with link and refresh buttons.
"""

import asyncio
import logging

import discord
from discord import app_commands
from discord.ext import commands

from profilebot.config import Config, HeaderConfig
from profilebot.services.profile import ProfileService
from profilebot.services.profile_source import ProfileSource
from profilebot.utils.error_embeds import ErrorEmbeds
from profilebot.utils.exceptions import DatabaseError, ProfileException, UserNotFoundError
from profilebot.views.header import ProfileHeaderView, TopHeader

logger = logging.getLogger(__name__)


class ProfileCog(commands.Cog):
    """Profile header commands."""

    def __init__(self, bot):
        self.bot = bot
        self.profile_service = ProfileService(bot.db.session_factory)
        self.header_config = HeaderConfig.from_config()

    @app_commands.command(name="profile", description="Show a user's profile header")
    @app_commands.describe(user_id="Id of the user whose profile you want to view")
    @app_commands.checks.cooldown(rate=1, per=10.0, key=lambda i: i.user.id)
    async def profile(self, interaction: discord.Interaction, user_id: app_commands.Range[int, 1]):
        """Display the profile header for a user."""
        # Defer immediately to secure interaction within 3-second window
        await interaction.response.defer()

        source = ProfileSource(self.profile_service)
        header = TopHeader(self.header_config)
        header.user.bind_to(source.current)

        try:
            await asyncio.wait_for(source.select(user_id), timeout=15.0)
        except asyncio.TimeoutError:
            logger.warning(f"Profile load for {user_id} timed out.")
            header.close()
            await interaction.followup.send(
                "⏰ The profile is taking too long to load. Please try again in a moment.",
                ephemeral=True
            )
            return
        except UserNotFoundError as e:
            header.close()
            await interaction.followup.send(embed=ErrorEmbeds.from_exception(e), ephemeral=True)
            return
        except DatabaseError as e:
            logger.error(f"Database error in profile command: {e}")
            header.close()
            await interaction.followup.send(embed=ErrorEmbeds.database_error(), ephemeral=True)
            return
        except ProfileException as e:
            header.close()
            await interaction.followup.send(embed=ErrorEmbeds.from_exception(e), ephemeral=True)
            return

        view = ProfileHeaderView(header, source)
        await interaction.followup.send(embed=header.to_embed(), view=view)

    @profile.error
    async def profile_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        """Handle errors for the profile command, including cooldown."""
        if isinstance(error, app_commands.CommandOnCooldown):
            if interaction.user.id == Config.OWNER_DISCORD_ID:
                await self.profile.callback(self, interaction, interaction.namespace.user_id)
            else:
                await interaction.response.send_message(
                    f"⏰ Rate limit exceeded. Please wait {error.retry_after:.0f} seconds before using `/profile` again.",
                    ephemeral=True
                )
        else:
            # Let other errors propagate
            raise error


async def setup(bot):
    await bot.add_cog(ProfileCog(bot))
