"""
Hex colour parsing for profile accents.
"""

import string

import discord

from profilebot.utils.exceptions import InvalidColourError

_HEX_DIGITS = frozenset(string.hexdigits)


def colour_from_hex(value: str) -> discord.Colour:
    """
    Parse a hex colour string into a Discord colour.

    Accepts ``rgb``, ``rgba``, ``rrggbb`` and ``rrggbbaa`` with an optional
    leading ``#``. Discord embeds have no alpha channel, so alpha is dropped.

    Raises:
        InvalidColourError: If the string is not one of the accepted forms
    """
    if not isinstance(value, str):
        raise InvalidColourError(value)

    digits = value.strip()
    if digits.startswith('#'):
        digits = digits[1:]

    if not digits or not set(digits) <= _HEX_DIGITS:
        raise InvalidColourError(value)

    if len(digits) in (3, 4):
        digits = ''.join(ch * 2 for ch in digits[:3])
    elif len(digits) in (6, 8):
        digits = digits[:6]
    else:
        raise InvalidColourError(value)

    return discord.Colour(int(digits, 16))
