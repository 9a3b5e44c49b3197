"""
Bank Card Payment Strategy

Files that USE this module:
- tengepay.adapters.console.menu (selected for menu option 1)

Files that this module USES:
- tengepay.adapters.payments.base (PaymentStrategy interface)
- tengepay.adapters.formatting.formatter (confirmation message)
"""
import logging
from dataclasses import dataclass

from tengepay.adapters.formatting.formatter import format_payment
from tengepay.adapters.payments.base import PaymentStrategy

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardPayment(PaymentStrategy):
    """Pays with a bank card identified by its number."""

    card_number: str
    kind = "card"

    @property
    def identifier(self) -> str:
        return self.card_number

    def pay(self, amount: float) -> str:
        log.info("Card payment of %s", amount)
        return format_payment(self.kind, amount, self.card_number)
