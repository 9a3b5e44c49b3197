"""
E-Wallet Payment Strategy

Files that USE this module:
- tengepay.adapters.console.menu (selected for menu option 2)

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
class WalletPayment(PaymentStrategy):
    """Pays through an e-wallet account identified by its email."""

    email: str
    kind = "wallet"

    @property
    def identifier(self) -> str:
        return self.email

    def pay(self, amount: float) -> str:
        log.info("E-wallet payment of %s", amount)
        return format_payment(self.kind, amount, self.email)
