"""Row formatter — classic 16-byte hex dump, aligned to address boundaries.

Every row covers one 16-byte-aligned block of the address space.  When the
input does not start (or end) on a block boundary the first (or last) row is
padded with blank slots so all columns line up::

    0000000C:                                       CC DD EE FF  |            ....|
    00000010:  68 65 78 64 75 6D 70 00                           |hexdump.        |

The formatter is pure: a ``HexDump`` only holds the bytes and their offset,
and rows/lines are produced lazily on each iteration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

ROW_WIDTH = 16
HALF_ROW = 8

_BLANK_SLOT = "   "


@dataclass(frozen=True, slots=True)
class Row:
    """One line of dump output.

    ``skip + len(data) + trail`` is always ``ROW_WIDTH``.
    """

    addr: int        # address of data[0]; also the line label
    skip: int        # blank slots before the first real byte
    trail: int       # blank slots after the last real byte
    data: bytes

    def __post_init__(self) -> None:
        if not (0 <= self.skip < ROW_WIDTH and 0 <= self.trail < ROW_WIDTH):
            raise ValueError(f"skip/trail out of range: {self.skip}/{self.trail}")
        if not self.data or self.skip + len(self.data) + self.trail != ROW_WIDTH:
            raise ValueError(
                f"row must span {ROW_WIDTH} slots, got "
                f"{self.skip} + {len(self.data)} + {self.trail}"
            )

    @property
    def end(self) -> int:
        return self.addr + len(self.data)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "address": self.addr,
            "label": f"{self.addr:08X}",
            "skip": self.skip,
            "trail": self.trail,
            "hex": [f"{b:02X}" for b in self.data],
            "ascii": "".join(_ascii_char(b) for b in self.data),
        }


def _ascii_char(byte: int) -> str:
    # DEL (0x7F) is a control character and is not printed.
    if 0x20 <= byte < 0x7F:
        return chr(byte)
    return "."


def _coerce_bytes(data: Any) -> bytes | bytearray:
    """Accept bytes-like objects or an iterable of ints in ``range(256)``."""
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, (str, int)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    try:
        return memoryview(data).tobytes()
    except TypeError:
        return bytes(data)


def iter_rows(data: bytes | bytearray, offset: int) -> Iterator[Row]:
    """Split *data* (whose first byte lives at *offset*) into aligned rows."""
    total_end = offset + len(data)
    addr = offset
    while addr < total_end:
        skip = addr % ROW_WIDTH
        row_end = min(addr + (ROW_WIDTH - skip), total_end)
        trail = ROW_WIDTH - 1 - ((row_end - 1) % ROW_WIDTH)
        yield Row(
            addr=addr,
            skip=skip,
            trail=trail,
            data=bytes(data[addr - offset:row_end - offset]),
        )
        addr = row_end


def format_row(row: Row) -> str:
    """Render *row* as one fixed-width line, including the trailing newline."""
    slots: list[int | None] = [None] * row.skip + list(row.data) + [None] * row.trail

    cells = [_BLANK_SLOT if b is None else f"{b:02X} " for b in slots]
    hex_col = "".join(cells[:HALF_ROW]) + " " + "".join(cells[HALF_ROW:])
    ascii_col = "".join(" " if b is None else _ascii_char(b) for b in slots)

    return f"{row.addr:08X}:  {hex_col} |{ascii_col}|\n"


def line_count(length: int, offset: int) -> int:
    """Number of rows touched by ``[offset, offset + length)``."""
    if length <= 0:
        return 0
    return (offset + length - 1) // ROW_WIDTH - offset // ROW_WIDTH + 1


@dataclass(frozen=True, slots=True)
class HexDump:
    """Immutable dump request: a byte sequence and the address of its first byte.

    Iterating yields formatted lines; ``str()`` joins them.  Iteration can be
    restarted any number of times and always produces the same output.
    """

    data: bytes | bytearray
    offset: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.offset, int) or isinstance(self.offset, bool):
            raise TypeError(f"offset must be an int, got {type(self.offset).__name__}")
        if self.offset < 0:
            raise ValueError(f"offset must be non-negative, got {self.offset}")
        object.__setattr__(self, "data", _coerce_bytes(self.data))

    def rows(self) -> Iterator[Row]:
        return iter_rows(self.data, self.offset)

    def __iter__(self) -> Iterator[str]:
        for row in self.rows():
            yield format_row(row)

    def __len__(self) -> int:
        return line_count(len(self.data), self.offset)

    def __str__(self) -> str:
        return "".join(self)

    def write(self, fp) -> None:
        """Stream the dump into a text file-like object, one line at a time."""
        for line in self:
            fp.write(line)


def hexdump(data: Any, offset: int = 0) -> HexDump:
    """Format *data* as a hex dump whose first byte is at address *offset*.

    >>> print(hexdump(b"hexdump", 0x10), end="")
    00000010:  68 65 78 64 75 6D 70                              |hexdump         |
    """
    return HexDump(data, offset)


def datadump(obj: Any) -> HexDump:
    """Dump the raw in-memory bytes of a buffer-protocol object at offset 0.

    Works for plain-old-data carriers such as ``ctypes`` scalars and
    structures, ``array.array`` and ``memoryview``.  Objects without a buffer
    raise ``TypeError``.
    """
    return HexDump(memoryview(obj).tobytes(), 0)
