"""
Base Payment Strategy Interface

This module defines the abstract base class for all payment methods.
It establishes the contract that every payment strategy must follow.

Files that USE this module:
- tengepay.adapters.payments.card (CardPayment implements PaymentStrategy)
- tengepay.adapters.payments.wallet (WalletPayment implements PaymentStrategy)
- tengepay.adapters.payments.crypto (CryptoPayment implements PaymentStrategy)
- tengepay.application.payment_context (holds the selected PaymentStrategy)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod


class PaymentStrategy(ABC):
    # Short name of the payment kind, e.g. "card"
    kind: str = ""

    @property
    @abstractmethod
    def identifier(self) -> str:
        """Return the card number, email or wallet address of this method."""
        raise NotImplementedError

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Apply ``amount`` with this method and return the confirmation message."""
        raise NotImplementedError
