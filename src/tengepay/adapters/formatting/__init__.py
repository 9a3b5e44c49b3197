"""
Formatting Adapters - Message Formatting

This package contains the text formatting for everything printed to the console.
"""

from tengepay.adapters.formatting.formatter import (
    format_amount,
    format_payment,
    format_rate_notice,
    menu_lines,
)

__all__ = [
    "format_amount",
    "format_payment",
    "format_rate_notice",
    "menu_lines",
]
