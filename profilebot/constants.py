"""
Bot-wide constants for the profile header bot.

Fixed display values for the profile header panel. Per-deployment settings
live in profilebot.config.
"""

class HeaderConstants:
    """Constants for the top profile header."""

    # Title colour used when a profile has none (or an unparseable one)
    DEFAULT_TITLE_COLOUR_HEX = "fff"

    # Profile link target when no user is bound
    NO_USER_ID = 0

class UIConstants:
    """Constants for Discord UI elements."""

    # Emoji for UI elements
    SUPPORTER_HEART = "❤"
    UNKNOWN_FLAG = "🏳"
    LINK_EMOJI = "🔗"
    REFRESH_EMOJI = "🔄"

    # Fallback embed title when the username slot is empty
    UNKNOWN_USER_TITLE = "Unknown user"

    # Seconds before an interactive header stops listening for button presses
    VIEW_TIMEOUT = 300
