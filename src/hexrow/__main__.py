"""CLI entry-point for hexrow.

Usage:
    python -m hexrow <path> [<path> ...]
    python -m hexrow -s <skip> -n <length> <path>
    python -m hexrow <path> --json
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from hexrow.contracts.load import DUMP_SCHEMA_VERSION, validate_instance
from hexrow.core.config import DumpConfig, parse_args
from hexrow.core.formatter import hexdump
from hexrow.core.reader import read_window
from hexrow.errors import DumpIOError, UsageError
from hexrow.utils.exit_codes import ExitCode
from hexrow.utils.json_norm import stable_json_dump, stable_json_dumps

_logger = logging.getLogger("hexrow")

RULE = "--------:----------------------------------------------------+----------------+"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ── text output ─────────────────────────────────────────────────────


def _dump_text(config: DumpConfig, path: Path, out: TextIO) -> None:
    """Write one bracketed dump; the banner goes out before the file is read."""
    out.write(f"Hex dump for {str(path)!r}:\n")
    data = read_window(path, skip=config.skip, length=config.length)
    out.write(RULE + "\n")
    hexdump(data, config.offset).write(out)
    out.write(RULE + "\n")


# ── json output ─────────────────────────────────────────────────────


def _dump_json(config: DumpConfig, out: TextIO) -> None:
    """Read every path, then emit a single schema-validated document."""
    dumps = []
    for path in config.paths:
        data = read_window(path, skip=config.skip, length=config.length)
        dump = hexdump(data, config.offset)
        dumps.append(
            {
                "path": path,
                "offset": config.offset,
                "length": len(data),
                "rows": [row.to_dict() for row in dump.rows()],
            }
        )
    document = {"schema_version": DUMP_SCHEMA_VERSION, "dumps": dumps}
    validate_instance(json.loads(stable_json_dumps(document)))
    stable_json_dump(document, out)


# ── entry point ─────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = dumped, 1 = usage or file error)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    try:
        config = parse_args(effective_argv)
    except UsageError as e:
        sys.stderr.write(e.usage)
        print(f"hexrow: error: {e.message}", file=sys.stderr)
        return ExitCode.ERROR

    _configure_logging(config.verbose)
    out = sys.stdout

    try:
        if config.json:
            _dump_json(config, out)
        else:
            for path in config.paths:
                _logger.info("dumping %s", path)
                _dump_text(config, path, out)
    except DumpIOError as e:
        out.flush()
        print(f"hexrow: {e}", file=sys.stderr)
        return ExitCode.ERROR

    return ExitCode.SUCCESS


def cli() -> None:
    """Console-script wrapper."""
    raise SystemExit(main())


if __name__ == "__main__":
    raise SystemExit(main())
