"""
Application Entry Point - Console Program

This module serves as the composition root for TengePay. It configures
logging, runs the interactive payment menu and then the fixed exchange-rate
demo.

Files that USE this module:
- python -m tengepay (module entry point)
- tengepay console script (pyproject.toml)

Files that this module USES:
- tengepay.shared.logging_conf (setup_logging for logging configuration)
- tengepay.config (settings for configuration management)
- tengepay.application.payment_context (PaymentContext)
- tengepay.adapters.console (menu, amount prompt and observer demo)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages and errors
from typing import Optional  # Type hints for optional values

from tengepay.config import settings  # Pydantic settings (logging options)
from tengepay.shared.logging_conf import setup_logging  # Configure logging with file rotation
from tengepay.adapters.console import (
    Console,  # stdin/stdout wrapper
    choose_payment_method,  # Payment menu
    read_amount,  # Amount prompt
    run_observer_demo,  # Fixed observer scenario
)
from tengepay.application.payment_context import PaymentContext  # Strategy context
from tengepay.domain.errors import InvalidChoiceError  # Raised for unknown menu options
from tengepay.shared.language import translate  # Localized messages


def main(console: Optional[Console] = None) -> int:
    """
    Run the payment menu and the exchange-rate demo.

    This function:
    1. Sets up logging from settings
    2. Lets the user pick a payment method (stops here on an invalid choice)
    3. Reads the amount and executes the payment
    4. Runs the observer demo

    Args:
        console: Console to use (default: stdin/stdout)

    Returns:
        Process exit code; 0 both on success and on an invalid menu choice
    """
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_console=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)

    console = console or Console()
    context = PaymentContext(writer=console.write)

    try:
        context.select(choose_payment_method(console))
    except InvalidChoiceError as e:
        logger.info("Stopping: %s", e)
        console.write(translate("invalid_choice"))
        return 0

    amount = read_amount(console)
    receipt = context.execute_payment(amount)
    logger.info("Payment finished: paid=%s method=%s", receipt.paid, receipt.method)

    run_observer_demo(console)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
