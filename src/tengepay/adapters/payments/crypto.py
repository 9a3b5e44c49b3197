"""
Cryptocurrency Payment Strategy

Files that USE this module:
- tengepay.adapters.console.menu (selected for menu option 3)

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
class CryptoPayment(PaymentStrategy):
    """Pays from a crypto wallet identified by its address."""

    wallet_address: str
    kind = "crypto"

    @property
    def identifier(self) -> str:
        return self.wallet_address

    def pay(self, amount: float) -> str:
        log.info("Crypto payment of %s", amount)
        return format_payment(self.kind, amount, self.wallet_address)
