"""
Exchange Service - USD/KZT Rate Holder and Broadcaster

This module contains the exchange-rate subject. It keeps the current rate
and an ordered list of subscribed observers, and pushes every new rate to
each of them.

Files that USE this module:
- tengepay.adapters.console.demo (runs the fixed observer demo)
- tests.test_exchange_service (unit tests)

Files that this module USES:
- tengepay.adapters.observers.base (RateObserver interface, Writer type)
- tengepay.adapters.formatting.formatter (new rate notice)
- tengepay.domain.models (RateChange)
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from tengepay.adapters.formatting.formatter import format_rate_notice
from tengepay.adapters.observers.base import RateObserver, Writer
from tengepay.domain.models import RateChange

logger = logging.getLogger(__name__)


class Subject(ABC):
    """Something observers can subscribe to."""

    @abstractmethod
    def add_observer(self, observer: RateObserver) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_observer(self, observer: RateObserver) -> None:
        raise NotImplementedError

    @abstractmethod
    def notify_observers(self) -> int:
        raise NotImplementedError


class CurrencyExchange(Subject):
    """
    USD/KZT rate publisher.

    Subscribers are kept in subscription order and may appear more than once.
    The exchange only references its observers; it does not manage their
    lifetime.
    """

    def __init__(self, rate: float = 0.0, writer: Optional[Writer] = None):
        """
        Args:
            rate: Initial rate in tenge per USD (default: 0.0)
            writer: Output callable for the new rate notice (default: print)
        """
        self._rate = rate
        self._observers: List[RateObserver] = []
        self._writer = writer or print

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def observers(self) -> Tuple[RateObserver, ...]:
        """Current subscribers, in subscription order."""
        return tuple(self._observers)

    def add_observer(self, observer: RateObserver) -> None:
        self._observers.append(observer)
        logger.info("Observer subscribed: %r (total=%d)", observer, len(self._observers))

    def remove_observer(self, observer: RateObserver) -> None:
        """Unsubscribe the first entry that is ``observer``; do nothing if absent."""
        for index, subscribed in enumerate(self._observers):
            if subscribed is observer:
                del self._observers[index]
                logger.info("Observer unsubscribed: %r (total=%d)", observer, len(self._observers))
                return
        logger.debug("Observer %r is not subscribed, nothing to remove", observer)

    def set_rate(self, rate: float) -> RateChange:
        """
        Store a new rate, print the notice and notify all subscribers.

        Args:
            rate: New rate in tenge per USD

        Returns:
            RateChange with the previous rate and the number of observers notified
        """
        previous = self._rate
        self._rate = rate
        logger.info("USD rate changed: %s -> %s", previous, rate)
        self._writer(format_rate_notice(rate))
        notified = self.notify_observers()
        return RateChange(previous=previous, current=rate, notified=notified)

    def notify_observers(self) -> int:
        """
        Deliver the current rate to every subscriber, in order.

        The subscriber list is copied first, so an observer that subscribes or
        unsubscribes during delivery takes effect from the next notification.

        Returns:
            Number of observers notified
        """
        subscribers = tuple(self._observers)
        for observer in subscribers:
            observer.update(self._rate)
        logger.debug("Notified %d observer(s) of rate %s", len(subscribers), self._rate)
        return len(subscribers)
