"""
Application Layer - Use Cases and Services

This package contains the payment context (Strategy pattern) and the
currency exchange subject (Observer pattern).
"""

from tengepay.application.payment_context import PaymentContext
from tengepay.application.exchange_service import CurrencyExchange, Subject

__all__ = [
    "PaymentContext",
    "CurrencyExchange",
    "Subject",
]
