import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Bot configuration settings"""

    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')
    DISCORD_GUILD_ID = int(os.getenv('DISCORD_GUILD_ID', 0))
    DISCORD_GUILD_IDS = os.getenv('DISCORD_GUILD_IDS', '')  # Comma-separated for multi-guild support
    OWNER_DISCORD_ID = int(os.getenv('OWNER_DISCORD_ID', 0))

    # Database settings
    DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///profiles.db')

    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

    # Profile site settings
    WEBSITE_ROOT_URL = os.getenv('WEBSITE_ROOT_URL', 'https://osu.ppy.sh').rstrip('/')
    AVATAR_ROOT_URL = os.getenv('AVATAR_ROOT_URL', 'https://a.ppy.sh').rstrip('/')
    AVATAR_PLACEHOLDER_URL = os.getenv(
        'AVATAR_PLACEHOLDER_URL',
        'https://osu.ppy.sh/images/layout/avatar-guest.png'
    )
    LOCALE = os.getenv('LOCALE', 'en')

    # Profile cache TTL in seconds
    PROFILE_CACHE_TTL = int(os.getenv('PROFILE_CACHE_TTL', 60))

    @classmethod
    def get_guild_ids(cls):
        """Get list of guild IDs for command syncing"""
        if cls.DISCORD_GUILD_IDS:
            # Multi-guild support: comma-separated IDs
            try:
                return [int(guild_id.strip()) for guild_id in cls.DISCORD_GUILD_IDS.split(',') if guild_id.strip()]
            except ValueError:
                raise ValueError("DISCORD_GUILD_IDS must be comma-separated integers")
        elif cls.DISCORD_GUILD_ID:
            return [cls.DISCORD_GUILD_ID]
        else:
            # Global sync
            return []

    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if not cls.WEBSITE_ROOT_URL.startswith(('http://', 'https://')):
            raise ValueError("WEBSITE_ROOT_URL must be an http(s) URL")


@dataclass(frozen=True)
class HeaderConfig:
    """Look-and-feel and link settings handed to a profile header at construction."""
    website_root_url: str = 'https://osu.ppy.sh'
    avatar_root_url: str = 'https://a.ppy.sh'
    avatar_placeholder_url: str = 'https://osu.ppy.sh/images/layout/avatar-guest.png'
    locale: str = 'en'
    accent_colour: int = 0xe6a1b3  # Country text colour

    def __post_init__(self):
        # Links are built as f"{root}/...", so roots never end in a slash
        object.__setattr__(self, 'website_root_url', self.website_root_url.rstrip('/'))
        object.__setattr__(self, 'avatar_root_url', self.avatar_root_url.rstrip('/'))

    @classmethod
    def from_config(cls) -> 'HeaderConfig':
        """Build header settings from the environment-backed Config."""
        return cls(
            website_root_url=Config.WEBSITE_ROOT_URL,
            avatar_root_url=Config.AVATAR_ROOT_URL,
            avatar_placeholder_url=Config.AVATAR_PLACEHOLDER_URL,
            locale=Config.LOCALE,
        )
