# src/tengepay/__main__.py
"""Module entry point: ``python -m tengepay``."""
import sys

from tengepay.app import main

sys.exit(main())
