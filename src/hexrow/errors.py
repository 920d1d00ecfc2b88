"""Exceptions raised by the CLI collaborators.

The formatter itself never fails for valid input; only argument parsing and
file access do.  ``hexrow.__main__.main`` is the single place that turns these
into diagnostics and exit codes.
"""

from __future__ import annotations

from pathlib import Path


class HexrowError(Exception):
    """Base class for every error the CLI reports."""


class UsageError(HexrowError):
    """Raised when the command line cannot be parsed."""

    def __init__(self, message: str, usage: str = "") -> None:
        self.message = message
        self.usage = usage
        super().__init__(message)


class DumpIOError(HexrowError):
    """Raised when a path cannot be opened, seeked or read."""

    def __init__(self, path: Path | str, cause: Exception | str) -> None:
        self.path = Path(path)
        self.cause = cause
        if isinstance(cause, OSError):
            reason = cause.strerror or str(cause)
        else:
            reason = str(cause)
        super().__init__(f"file error {str(self.path)!r}: {reason}.")
