"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and domain errors.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidChoiceError(DomainError):
    """Raised when the payment menu receives a selection it does not offer."""

    def __init__(self, choice):
        self.choice = choice
        super().__init__(f"Invalid payment menu choice: {choice!r}")
