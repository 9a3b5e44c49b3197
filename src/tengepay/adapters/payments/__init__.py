"""
Payment Adapters - Payment Strategies

This package contains the interchangeable payment methods.
All of them implement the PaymentStrategy interface.
"""

from tengepay.adapters.payments.base import PaymentStrategy
from tengepay.adapters.payments.card import CardPayment
from tengepay.adapters.payments.crypto import CryptoPayment
from tengepay.adapters.payments.wallet import WalletPayment

__all__ = [
    "PaymentStrategy",
    "CardPayment",
    "CryptoPayment",
    "WalletPayment",
]
