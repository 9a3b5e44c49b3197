"""
Console Adapters - Terminal Interface

This package contains the interactive payment menu and the fixed
exchange-rate demo that run on stdin/stdout.
"""

from tengepay.adapters.console.terminal import Console
from tengepay.adapters.console.menu import choose_payment_method, read_amount
from tengepay.adapters.console.demo import run_observer_demo

__all__ = [
    "Console",
    "choose_payment_method",
    "read_amount",
    "run_observer_demo",
]
