"""
Observer Adapters - Rate Subscribers

This package contains the parties that react to USD/KZT rate changes.
All of them implement the RateObserver interface.
"""

from tengepay.adapters.observers.base import RateObserver
from tengepay.adapters.observers.bank import BankObserver
from tengepay.adapters.observers.exchange_office import ExchangeOfficeObserver
from tengepay.adapters.observers.investor import InvestorObserver

__all__ = [
    "RateObserver",
    "BankObserver",
    "ExchangeOfficeObserver",
    "InvestorObserver",
]
