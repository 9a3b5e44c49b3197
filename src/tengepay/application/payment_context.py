"""
Payment Context - Runs the Selected Payment Strategy

This module holds the payment context: the user picks one payment method at
runtime and the context applies an amount with whatever method is selected.

Files that USE this module:
- tengepay.app (creates the context, selects the strategy built by
  tengepay.adapters.console.menu and executes the payment)
- tests.test_payments (unit tests)

Files that this module USES:
- tengepay.adapters.payments.base (PaymentStrategy interface)
- tengepay.adapters.formatting.formatter (no method notice)
- tengepay.adapters.observers.base (Writer output callable type)
- tengepay.domain.models (PaymentReceipt)
"""
from __future__ import annotations

import logging
from typing import Optional

from tengepay.adapters.formatting.formatter import format_no_method
from tengepay.adapters.observers.base import Writer
from tengepay.adapters.payments.base import PaymentStrategy
from tengepay.domain.models import PaymentReceipt

logger = logging.getLogger(__name__)


class PaymentContext:
    """
    Holds zero or one selected payment strategy.

    Executing a payment without a selection is not an error: the context
    prints a notice and returns an unpaid receipt.
    """

    def __init__(self, writer: Optional[Writer] = None):
        """
        Args:
            writer: Output callable for confirmations and notices (default: print)
        """
        self._strategy: Optional[PaymentStrategy] = None
        self._writer = writer or print

    @property
    def selected(self) -> Optional[PaymentStrategy]:
        return self._strategy

    def select(self, strategy: PaymentStrategy) -> None:
        """Select ``strategy``, replacing any previous selection."""
        if self._strategy is not None:
            logger.debug("Replacing payment method %s with %s", self._strategy.kind, strategy.kind)
        self._strategy = strategy
        logger.info("Payment method selected: %s", strategy.kind)

    def execute_payment(self, amount: float) -> PaymentReceipt:
        """
        Pay ``amount`` with the selected method and print the result.

        The amount is used as given; zero and negative amounts are accepted.

        Args:
            amount: Amount in tenge

        Returns:
            PaymentReceipt with paid=False if no method was selected
        """
        if self._strategy is None:
            message = format_no_method()
            logger.warning("Payment of %s requested with no payment method selected", amount)
            self._writer(message)
            return PaymentReceipt(amount=amount, message=message, paid=False)

        message = self._strategy.pay(amount)
        self._writer(message)
        return PaymentReceipt(
            amount=amount,
            message=message,
            paid=True,
            method=self._strategy.kind,
            identifier=self._strategy.identifier,
        )
