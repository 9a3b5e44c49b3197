"""
Payment Menu - Interactive Payment Method Selection

Prints the payment menu, reads the user's choice and builds the matching
payment strategy, then reads the amount to pay.

Files that USE this module:
- tengepay.app (runs the menu before executing the payment)
- tests.test_console (unit tests)

Files that this module USES:
- tengepay.adapters.console.terminal (Console)
- tengepay.adapters.payments.* (the three payment strategies)
- tengepay.adapters.formatting.formatter (menu lines)
- tengepay.shared.language (prompts)
- tengepay.shared.validators (parse_menu_choice)
- tengepay.domain.errors (InvalidChoiceError)
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from tengepay.adapters.console.terminal import Console
from tengepay.adapters.formatting.formatter import menu_lines
from tengepay.adapters.payments import CardPayment, CryptoPayment, PaymentStrategy, WalletPayment
from tengepay.domain.errors import InvalidChoiceError
from tengepay.shared.language import translate
from tengepay.shared.validators import parse_menu_choice

logger = logging.getLogger(__name__)

# Menu option -> (prompt key, strategy factory)
MENU_OPTIONS: Dict[int, Tuple[str, Callable[[str], PaymentStrategy]]] = {
    1: ("prompt_card", CardPayment),
    2: ("prompt_email", WalletPayment),
    3: ("prompt_wallet", CryptoPayment),
}


def choose_payment_method(console: Console) -> PaymentStrategy:
    """
    Show the menu and build the payment method the user picks.

    Args:
        console: Console to print to and read from

    Returns:
        The selected payment strategy, built from the identifier the user typed

    Raises:
        InvalidChoiceError: If the selection is not one of the menu options.
            Nothing further is read from the console in that case.
    """
    for line in menu_lines():
        console.write(line)

    raw = console.read_line()
    choice = parse_menu_choice(raw)
    if choice not in MENU_OPTIONS:
        raise InvalidChoiceError(raw)

    prompt_key, factory = MENU_OPTIONS[choice]
    identifier = console.prompt(translate(prompt_key))
    logger.debug("Menu option %d selected", choice)
    return factory(identifier)


def read_amount(console: Console) -> float:
    """
    Prompt for the payment amount.

    Raises:
        ValueError: If the answer is not a number
    """
    return float(console.prompt(translate("prompt_amount")).strip())
