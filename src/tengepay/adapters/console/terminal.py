"""
Console I/O - Line-oriented Terminal Streams

Files that USE this module:
- tengepay.app (creates the Console bound to stdin/stdout)
- tengepay.adapters.console.menu (prompts and reads answers)
- tengepay.adapters.console.demo (prints the demo transcript)

Files that this module USES:
- None
"""
import sys
from typing import Optional, TextIO


class Console:
    """Reads answers from ``stdin`` and writes lines to ``stdout``."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, message: str = "") -> None:
        """Print one line."""
        self.stdout.write(message + "\n")
        self.stdout.flush()

    def prompt(self, message: str) -> str:
        """
        Print ``message`` without a newline and read the answer.

        Returns:
            The answer line without its line ending ('' at end of input)
        """
        self.stdout.write(message)
        self.stdout.flush()
        return self.stdin.readline().rstrip("\r\n")

    def read_line(self) -> str:
        return self.stdin.readline().rstrip("\r\n")
