"""
Message Formatter - Text Formatting and Presentation

This module builds every line the program prints: the payment menu and
prompts, payment confirmations, and the exchange-rate notices produced by
the subject and its observers.

Numbers are rendered the way a float prints in Python (``1000.0``,
``-5.0``, ``495.0``) so amounts and rates always appear verbatim.

Files that USE this module:
- tengepay.adapters.payments.* (payment confirmation messages)
- tengepay.adapters.observers.* (observer reactions)
- tengepay.application.exchange_service (new rate notice)
- tengepay.application.payment_context (no method notice)
- tengepay.adapters.console.* (menu, prompts and demo headers)
- tests.test_formatter (unit tests)

Files that this module USES:
- tengepay.shared.language (translate for multi-language support)
"""
from __future__ import annotations

from typing import List

from tengepay.shared.language import translate

# Payment kind -> translation key of its confirmation message
_PAYMENT_KEYS = {
    "card": "paid_card",
    "wallet": "paid_wallet",
    "crypto": "paid_crypto",
}


def format_amount(value: float) -> str:
    """
    Format an amount or rate for display.

    Args:
        value: Number to format (ints are shown as floats, e.g. 500 -> '500.0')

    Returns:
        The number as Python prints a float
    """
    return str(float(value))


def menu_lines() -> List[str]:
    """Return the payment menu, header first."""
    return [
        translate("menu_header"),
        translate("menu_card"),
        translate("menu_wallet"),
        translate("menu_crypto"),
    ]


def format_payment(kind: str, amount: float, identifier: str) -> str:
    """
    Format a payment confirmation.

    Args:
        kind: Payment kind ("card", "wallet" or "crypto")
        amount: Amount paid, shown verbatim (no sign or range checks)
        identifier: Card number, email or wallet address

    Returns:
        Confirmation line naming the amount and the identifier

    Raises:
        KeyError: If kind is not a known payment kind
    """
    return translate(_PAYMENT_KEYS[kind], amount=format_amount(amount), identifier=identifier)


def format_no_method() -> str:
    return translate("no_method")


def format_rate_notice(rate: float) -> str:
    """New-rate notice, preceded by a blank line."""
    return "\n" + translate("new_rate", rate=format_amount(rate))


def format_bank_update(rate: float) -> str:
    return translate("bank_update", rate=format_amount(rate))


def format_investor_decision(sell: bool) -> str:
    return translate("investor_sell" if sell else "investor_buy")


def format_office_update(rate: float) -> str:
    return translate("office_update", rate=format_amount(rate))


def format_demo_header() -> str:
    return "\n" + translate("observer_demo_header")


def format_observer_removed() -> str:
    return "\n" + translate("observer_removed")
