"""
Bank Observer - acknowledges every rate change.
"""
import logging

from tengepay.adapters.formatting.formatter import format_bank_update
from tengepay.adapters.observers.base import RateObserver

log = logging.getLogger(__name__)


class BankObserver(RateObserver):
    name = "bank"

    def update(self, rate: float) -> None:
        log.debug("Bank notified: rate=%s", rate)
        self.emit(format_bank_update(rate))
