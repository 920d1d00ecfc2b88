"""hexrow — 16-byte-aligned hex dumps of byte buffers and files."""

__all__ = [
    "__version__",
    "HexDump",
    "Row",
    "hexdump",
    "datadump",
]
__version__ = "0.1.0"

from hexrow.core.formatter import (  # noqa: E402, F401
    HexDump,
    Row,
    datadump,
    hexdump,
)
