# src/tengepay/__init__.py
"""
TengePay - Console Payment and Exchange Rate Simulation

A small console program that lets the user pay with a pluggable payment
method (bank card, e-wallet or crypto wallet) and then shows how banks,
investors and exchange offices react to USD/KZT rate changes.
"""

__version__ = "1.0.0"
