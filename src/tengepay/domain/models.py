"""
Domain Models - Pure Business Objects

This module contains the value objects produced by the payment and
exchange-rate components:
- Payment receipts
- Rate changes

Files that USE this module:
- tengepay.application.* (services return domain models)
- tests.* (tests assert on domain models)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from typing import Optional  # Type hints for optional values


@dataclass(frozen=True)
class PaymentReceipt:
    """
    Outcome of executing a payment.

    Attributes:
        amount: Amount that was requested, exactly as given
        message: Human-readable text that was printed for this payment
        paid: False when no payment method was selected
        method: Kind of payment method used ("card", "wallet", "crypto")
        identifier: Card number, email or wallet address of the method
    """
    amount: float
    message: str
    paid: bool
    method: Optional[str] = None
    identifier: Optional[str] = None


@dataclass(frozen=True)
class RateChange:
    """
    Result of setting a new USD/KZT rate.

    Attributes:
        previous: Rate before the change
        current: Rate after the change
        notified: Number of observers that received the new rate
    """
    previous: float
    current: float
    notified: int
