"""
Base Rate Observer Interface

This module defines the abstract base class for everything that subscribes
to USD/KZT rate changes.

Files that USE this module:
- tengepay.adapters.observers.* (concrete observers implement RateObserver)
- tengepay.application.exchange_service (CurrencyExchange notifies RateObserver instances)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional

Writer = Callable[[str], None]


class RateObserver(ABC):
    """
    Receives the current rate whenever the subject changes it.

    Observers print their reaction through ``writer`` (``print`` by default),
    so tests and other front ends can capture the output.
    """

    name: str = "observer"

    def __init__(self, writer: Optional[Writer] = None):
        self._writer: Writer = writer or print

    def emit(self, message: str) -> None:
        self._writer(message)

    @abstractmethod
    def update(self, rate: float) -> None:
        """React to a new USD/KZT rate."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
