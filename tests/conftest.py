"""
Shared pytest fixtures.

Files that USE this module:
- pytest (loaded automatically for every test module)

Files that this module USES:
- tengepay.shared.language (language_manager reset between tests)
- tengepay.adapters.console.terminal (Console over in-memory streams)
- logging (root handler reset for setup_logging tests)
"""
import io
import logging
from contextlib import contextmanager

import pytest  # Testing framework for writing and running tests

from tengepay.adapters.console.terminal import Console  # Console wrapper under test
from tengepay.shared.language import language_manager, LANG_ENGLISH  # Global language state


@pytest.fixture(autouse=True)
def english():
    """Run every test in English and restore the previous language afterwards."""
    previous = language_manager.get_language()
    language_manager.set_language(LANG_ENGLISH)
    yield
    language_manager.set_language(previous)


@contextmanager
def _bare_root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


@pytest.fixture
def bare_root_logger():
    """
    Context manager that detaches every root handler so basicConfig() in
    setup_logging takes effect, then closes what it installed and puts the
    original handlers back.

    Enter it inside the test body: pytest attaches its own capture handlers
    only once the test call starts.
    """
    return _bare_root_logger


@pytest.fixture
def make_console():
    """Build a Console reading ``text`` and writing to an in-memory buffer."""
    def _make(text: str = "") -> Console:
        return Console(stdin=io.StringIO(text), stdout=io.StringIO())
    return _make
