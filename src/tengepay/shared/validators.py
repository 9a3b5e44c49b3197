"""
Input Validation Utilities

Small validation helpers used by the settings layer and the console menu.

Files that USE this module:
- tengepay.config.settings (uses validation functions in Settings field validators)
- tengepay.adapters.console.menu (parse_menu_choice for the payment menu)

Files that this module USES:
- None (pure utility functions)
"""
import logging
import re
from typing import Optional

SUPPORTED_LANGUAGES = ("en", "ru")


def validate_language_code(code: str) -> bool:
    """
    Validate a language code.

    Args:
        code: Language code to validate (e.g. 'en', 'ru')

    Returns:
        True if the language is supported, False otherwise
    """
    return code in SUPPORTED_LANGUAGES


def validate_log_level(level: str) -> bool:
    """
    Validate a logging level name.

    Args:
        level: Level name such as 'DEBUG' or 'WARNING'

    Returns:
        True if the name maps to a standard logging level, False otherwise
    """
    return isinstance(logging.getLevelName(level), int)


def parse_menu_choice(raw: Optional[str]) -> Optional[int]:
    """
    Parse a menu selection typed by the user.

    Only the first whitespace-separated token counts; the rest of the line
    is discarded, so '1 extra' selects option 1.

    Args:
        raw: Raw input line (may be None or contain surrounding whitespace)

    Returns:
        The selection as an integer, or None if the first token is not an integer
    """
    if raw is None:
        return None
    tokens = raw.split()
    if not tokens or not re.match(r'^[+-]?\d+$', tokens[0]):
        return None
    return int(tokens[0])
