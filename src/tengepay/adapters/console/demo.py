"""
Observer Demo - Fixed Exchange Rate Scenario

Subscribes a bank, an investor and an exchange office to one currency
exchange, moves the rate twice, unsubscribes the bank and moves it again.
Reads no input.
"""
from __future__ import annotations

import logging
from typing import List

from tengepay.adapters.console.terminal import Console
from tengepay.adapters.formatting.formatter import format_demo_header, format_observer_removed
from tengepay.adapters.observers import BankObserver, ExchangeOfficeObserver, InvestorObserver
from tengepay.application.exchange_service import CurrencyExchange
from tengepay.domain.models import RateChange

logger = logging.getLogger(__name__)

DEMO_RATES = (495.0, 510.0)
RATE_AFTER_REMOVAL = 530.0


def run_observer_demo(console: Console) -> List[RateChange]:
    """
    Run the scenario and print its transcript to ``console``.

    Returns:
        One RateChange per rate update, in order
    """
    console.write(format_demo_header())

    exchange = CurrencyExchange(writer=console.write)
    bank = BankObserver(writer=console.write)
    investor = InvestorObserver(writer=console.write)
    office = ExchangeOfficeObserver(writer=console.write)

    exchange.add_observer(bank)
    exchange.add_observer(investor)
    exchange.add_observer(office)

    changes = [exchange.set_rate(rate) for rate in DEMO_RATES]

    exchange.remove_observer(bank)
    console.write(format_observer_removed())

    changes.append(exchange.set_rate(RATE_AFTER_REMOVAL))
    logger.info("Observer demo finished: %d rate updates", len(changes))
    return changes
