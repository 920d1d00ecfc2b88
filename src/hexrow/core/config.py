"""Dump configuration dataclass and the command-line parser that builds it."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from hexrow import __version__
from hexrow.errors import UsageError


@dataclass(frozen=True)
class DumpConfig:
    """Immutable dump configuration.

    ``skip`` doubles as the address of the first dumped byte.
    """

    paths: tuple[Path, ...] = ()
    length: int | None = None     # None → read to EOF
    skip: int | None = None
    json: bool = False
    verbose: bool = False

    @property
    def offset(self) -> int:
        return self.skip or 0


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message, usage=self.format_usage())


def _byte_count(text: str) -> int:
    """Parse a non-negative byte count (decimal, or ``0x``/``0o``/``0b`` prefixed)."""
    try:
        value = int(text, 10)
    except ValueError:
        try:
            value = int(text, 0)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{text!r}: not a number") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"{text!r}: must not be negative")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="hexrow",
        description="Print files as a 16-byte-aligned hex dump.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-n",
        dest="length",
        metavar="LENGTH",
        type=_byte_count,
        default=None,
        help="Dump exactly LENGTH bytes (fails if the file is shorter)",
    )
    p.add_argument(
        "-s",
        dest="skip",
        metavar="SKIP",
        type=_byte_count,
        default=None,
        help="Skip SKIP bytes first; addresses start at SKIP",
    )
    p.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Emit rows as JSON instead of text",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log progress to stderr",
    )
    p.add_argument("paths", nargs="*", type=Path, metavar="PATH", help="Files to dump")
    return p


def parse_args(argv: Sequence[str]) -> DumpConfig:
    """Parse *argv* (without the program name) into a ``DumpConfig``.

    Raises ``UsageError`` on unknown flags, missing values or bad numbers.
    Flags may appear anywhere; everything after ``--`` is a path.
    """
    argv = list(argv)
    if "--" in argv:
        split = argv.index("--")
        flags, trailing = argv[:split], argv[split + 1:]
    else:
        flags, trailing = argv, []

    args = build_parser().parse_intermixed_args(flags)
    return DumpConfig(
        paths=tuple(args.paths) + tuple(Path(p) for p in trailing),
        length=args.length,
        skip=args.skip,
        json=args.json,
        verbose=args.verbose,
    )
