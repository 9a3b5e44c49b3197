"""
Domain Layer - Pure Business Objects

This package contains domain models and business errors.
No dependencies on infrastructure or external systems.
"""

from tengepay.domain.models import PaymentReceipt, RateChange
from tengepay.domain.errors import DomainError, InvalidChoiceError

__all__ = [
    "PaymentReceipt",
    "RateChange",
    "DomainError",
    "InvalidChoiceError",
]
