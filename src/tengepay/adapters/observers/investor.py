"""
Investor Observer - decides to buy or sell on each rate change.

Files that USE this module:
- tengepay.adapters.console.demo (subscribes an investor in the observer demo)

Files that this module USES:
- tengepay.adapters.observers.base (RateObserver interface)
- tengepay.adapters.formatting.formatter (decision messages)
- tengepay.config (default threshold)
"""
import logging
from typing import Optional

from tengepay.adapters.formatting.formatter import format_investor_decision
from tengepay.adapters.observers.base import RateObserver, Writer
from tengepay.config import settings

log = logging.getLogger(__name__)


class InvestorObserver(RateObserver):
    """
    Sells when the rate is strictly above ``threshold`` and buys otherwise,
    so a rate exactly at the threshold is a buy.
    """

    name = "investor"

    def __init__(self, threshold: Optional[float] = None, writer: Optional[Writer] = None):
        """
        Args:
            threshold: Sell/buy boundary in tenge per USD (default: settings.investor_threshold)
            writer: Output callable (default: print)
        """
        super().__init__(writer)
        self.threshold = settings.investor_threshold if threshold is None else threshold

    def should_sell(self, rate: float) -> bool:
        return rate > self.threshold

    def update(self, rate: float) -> None:
        sell = self.should_sell(rate)
        log.debug("Investor notified: rate=%s threshold=%s sell=%s", rate, self.threshold, sell)
        self.emit(format_investor_decision(sell))

    def __repr__(self) -> str:
        return f"InvestorObserver(threshold={self.threshold})"
