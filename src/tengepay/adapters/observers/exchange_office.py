"""
Exchange Office Observer - refreshes its rate board on every change.
"""
import logging

from tengepay.adapters.formatting.formatter import format_office_update
from tengepay.adapters.observers.base import RateObserver

log = logging.getLogger(__name__)


class ExchangeOfficeObserver(RateObserver):
    name = "exchange_office"

    def update(self, rate: float) -> None:
        log.debug("Exchange office notified: rate=%s", rate)
        self.emit(format_office_update(rate))
