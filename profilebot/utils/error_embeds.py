"""
Centralized error embeds for consistent error handling across the profile bot.
"""

import discord
from discord import app_commands

from profilebot.utils.exceptions import ProfileException, UserNotFoundError


class ErrorEmbeds:
    """Centralized error embed factory for consistent error handling."""

    @staticmethod
    def user_not_found(user_id: int) -> discord.Embed:
        """Create embed for when no profile exists for a user id."""
        return discord.Embed(
            title="User Not Found",
            description=f"No profile is stored for user `{user_id}`.",
            color=discord.Color.red()
        )

    @staticmethod
    def database_error() -> discord.Embed:
        return discord.Embed(
            title="Database Error",
            description="A database error occurred. Please try again later or contact an administrator.",
            color=discord.Color.red()
        )

    @staticmethod
    def app_command_error(error: app_commands.AppCommandError) -> discord.Embed:
        """Embed for a slash command failure that no command handler dealt with."""
        if isinstance(error, app_commands.CommandOnCooldown):
            title = "❌ Command is on cooldown"
            description = f"Try again in {error.retry_after:.0f} seconds."
        elif isinstance(error, app_commands.CheckFailure):
            title = "❌ Permission Denied"
            description = "You can't use this command here."
        else:
            title = "❌ Something went wrong"
            description = "The profile could not be shown. Please try again later."
        return discord.Embed(title=title, description=description, color=discord.Color.red())

    @staticmethod
    def from_exception(error: ProfileException) -> discord.Embed:
        """Pick the embed matching a profile exception."""
        if isinstance(error, UserNotFoundError):
            return ErrorEmbeds.user_not_found(error.user_id)
        return discord.Embed(
            title="Profile Error",
            description=error.user_message,
            color=discord.Color.red()
        )
