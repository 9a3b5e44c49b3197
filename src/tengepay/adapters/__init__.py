"""
Adapters Layer - External Interfaces

This package contains the pluggable pieces and the terminal surface:
- Payments (strategy implementations)
- Observers (rate subscribers)
- Formatting (output text)
- Console (menu and demo I/O)
"""

__all__ = []
