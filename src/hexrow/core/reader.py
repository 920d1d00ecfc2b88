"""Byte source — read the requested window of a file into memory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from hexrow.errors import DumpIOError

_logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1 << 20


def _read_at_most(f: BinaryIO, length: int) -> bytes:
    # Never ask the buffer for more than one chunk; read(n) allocates n up front.
    chunks: list[bytes] = []
    remaining = length
    while remaining:
        chunk = f.read(min(remaining, _CHUNK_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_window(
    path: Path,
    *,
    skip: int | None = None,
    length: int | None = None,
) -> bytes:
    """Return ``length`` bytes of *path* starting ``skip`` bytes in.

    ``length=None`` reads to EOF.  When ``length`` is given the read must be
    exact; a shorter file raises ``DumpIOError`` just like an open/seek/read
    failure does.  Offsets too large for the platform are reported the same way.
    """
    _logger.debug("reading %s (skip=%s, length=%s)", path, skip, length)
    try:
        with open(path, "rb") as f:
            if skip:
                f.seek(skip, os.SEEK_CUR)
            data = f.read() if length is None else _read_at_most(f, length)
    except (OSError, OverflowError, ValueError) as exc:
        raise DumpIOError(path, exc) from exc

    if length is not None and len(data) < length:
        raise DumpIOError(
            path, f"expected {length} bytes, only {len(data)} available"
        )
    _logger.debug("read %d bytes from %s", len(data), path)
    return data
