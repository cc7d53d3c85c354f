import asyncio
import logging
from typing import Optional

import discord
from discord.ext import commands
from discord import app_commands

from profilebot.config import Config
from profilebot.database.database import Database
from profilebot.utils.error_embeds import ErrorEmbeds
from profilebot.utils.logger import setup_logger

class ProfileBot(commands.Bot):
    def __init__(self):
        intents = discord.Intents.default()
        intents.guilds = True

        super().__init__(
            command_prefix=Config.COMMAND_PREFIX,
            intents=intents,
            help_command=None
        )

        # Attach app command error handler
        self.tree.on_error = self.on_app_command_error

        self.db: Optional[Database] = None
        self.logger = setup_logger(__name__)

    async def setup_hook(self):
        """Called when the bot is starting up"""
        self.logger.info("Setting up Profile Bot...")

        self.db = Database()
        await self.db.initialize()

        await self.load_cogs()
        await self._sync_commands()

        self.logger.info("Profile Bot setup complete!")

    async def load_cogs(self):
        """Load all cogs"""
        cogs_to_load = [
            'profilebot.cogs.profile',
        ]

        for cog in cogs_to_load:
            try:
                await self.load_extension(cog)
                self.logger.info(f"Loaded cog: {cog}")
            except Exception as e:
                self.logger.error(f"Failed to load cog {cog}: {e}", exc_info=True)

    async def _sync_commands(self):
        """Sync slash commands to the configured guilds, or globally when none are set"""
        if not self.tree.get_commands():
            self.logger.warning("No slash commands registered; skipping sync")
            return

        guild_ids = Config.get_guild_ids()
        targets = [discord.Object(id=guild_id) for guild_id in guild_ids] or [None]

        for guild in targets:
            where = f"guild {guild.id}" if guild else "global scope"
            try:
                if guild:
                    self.tree.copy_global_to(guild=guild)
                synced = await self.tree.sync(guild=guild)
                self.logger.info(f"Synced {len(synced)} command(s) to {where}")
            except discord.errors.HTTPException as e:
                # Bot keeps running with whatever commands Discord already has
                self.logger.error(f"Command sync to {where} failed: {e}", exc_info=True)

    async def on_ready(self):
        """Called when the bot is ready"""
        self.logger.info(f'{self.user} is online in {len(self.guilds)} guild(s)')

        await self.change_presence(
            activity=discord.Game(name="/profile")
        )

    async def on_app_command_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        """Global error handler for slash commands"""
        command_name = interaction.command.name if interaction.command else 'unknown'
        if isinstance(error, app_commands.CheckFailure):
            self.logger.info(f"/{command_name} refused for {interaction.user}: {error}")
        else:
            self.logger.error(f"/{command_name} failed: {error}", exc_info=error)

        embed = ErrorEmbeds.app_command_error(error)
        try:
            if interaction.response.is_done():
                await interaction.followup.send(embed=embed, ephemeral=True)
            else:
                await interaction.response.send_message(embed=embed, ephemeral=True)
        except discord.errors.HTTPException as e:
            self.logger.error(f"Could not report error for /{command_name}: {e}")

    async def close(self):
        """Cleanup when bot is shutting down"""
        self.logger.info("Shutting down Profile Bot...")

        if self.db:
            await self.db.close()

        await super().close()

async def main():
    """Main entry point"""
    Config.validate()

    bot = ProfileBot()

    try:
        await bot.start(Config.DISCORD_TOKEN)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.exception(f"Fatal error: {e}")
    finally:
        await bot.close()

def run():
    asyncio.run(main())

if __name__ == "__main__":
    run()
