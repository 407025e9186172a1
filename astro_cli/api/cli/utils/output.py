"""Output formatting utilities for Astro CLI commands."""

import sys
from typing import Optional, TextIO


class OutputFormatter:
    """Handles consistent output formatting across CLI commands."""

    def __init__(self, verbose: bool = False, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        """Initialize output formatter.

        Args:
            verbose: Whether to enable verbose output
            out: Stream for regular output (default: stdout)
            err: Stream for errors (default: stderr)
        """
        self.verbose = verbose
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement is honoured
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def info(self, message: str) -> None:
        print(message, file=self.out)

    def success(self, message: str) -> None:
        print(f"✅ {message}", file=self.out)

    def warning(self, message: str) -> None:
        print(f"⚠️  {message}", file=self.err)

    def error(self, message: str) -> None:
        print(f"❌ {message}", file=self.err)

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            print(f"🔍 {message}", file=self.out)
