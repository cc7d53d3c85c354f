from typing import Optional

# Offset from 'A' to REGIONAL INDICATOR SYMBOL LETTER A
_REGIONAL_INDICATOR_OFFSET = 0x1F1E6 - ord('A')


def flag_glyph(country_code: Optional[str]) -> Optional[str]:
    """Return the flag emoji for a two-letter country code, or None if it isn't one."""
    if not country_code:
        return None
    code = country_code.strip().upper()
    if len(code) != 2 or not code.isascii() or not code.isalpha():
        return None
    return ''.join(chr(ord(ch) + _REGIONAL_INDICATOR_OFFSET) for ch in code)
