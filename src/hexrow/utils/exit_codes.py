"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — every path was dumped
  1   Error — usage error, missing file, short read
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
