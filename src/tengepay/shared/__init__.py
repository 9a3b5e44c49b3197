"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Language management (tengepay.shared.language)
- Logging configuration

The language module reads settings on import, so it is not re-exported here.
"""

from tengepay.shared.validators import (
    parse_menu_choice,
    validate_language_code,
    validate_log_level,
    SUPPORTED_LANGUAGES,
)
from tengepay.shared.logging_conf import setup_logging

__all__ = [
    "parse_menu_choice",
    "validate_language_code",
    "validate_log_level",
    "SUPPORTED_LANGUAGES",
    "setup_logging",
]
