# topmark:header:start
#
#   project      : UtilKit
#   file         : size.py
#   file_relpath : src/utilkit/files/size.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte-count formatting and size limits."""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, Final

from utilkit.config.logging import get_logger
from utilkit.formatting.numbers import to_fixed

if TYPE_CHECKING:
    from os import PathLike

    from utilkit.config.logging import UtilkitLogger

logger: UtilkitLogger = get_logger(__name__)

SIZE_UNITS: Final[tuple[str, ...]] = ("Bytes", "KB", "MB", "GB", "TB", "PB")
KILO: Final[int] = 1024
BYTES_PER_MB: Final[int] = KILO * KILO


def format_file_size(size: float, decimals: int = 2) -> str:
    """Render a byte count with the largest binary unit it reaches.

    Exactly zero renders as ``"0 Bytes"``. Values below one byte stay in
    ``Bytes`` and values beyond the petabyte range stay in ``PB``. Negative counts
    keep their sign; NaN and infinities render as ``"nan Bytes"``/``"inf Bytes"``.

    Args:
        size (float): Number of bytes.
        decimals (int): Fixed number of decimal places (negative means 0). Defaults to 2.

    Returns:
        str: ``format_file_size(1048576) == "1.00 MB"``, ``format_file_size(1536, 0) == "2 KB"``.
    """
    if size == 0:
        return "0 Bytes"
    if not math.isfinite(size):
        return f"{size} {SIZE_UNITS[0]}"
    if size < 0:
        return "-" + format_file_size(-size, decimals)

    index: int = 0
    while index < len(SIZE_UNITS) - 1 and size >= KILO ** (index + 1):
        index += 1
    return f"{to_fixed(size / KILO**index, decimals)} {SIZE_UNITS[index]}"


def validate_file_size(file: str | PathLike[str] | int, max_size_mb: float) -> bool:
    """Return True if ``file`` is at most ``max_size_mb`` megabytes (MiB).

    Args:
        file (str | PathLike[str] | int): A path to stat, or a byte count.
        max_size_mb (float): Size limit in megabytes of 1024 * 1024 bytes.

    Returns:
        bool: Whether the size is within the limit (the limit itself included).

    Raises:
        OSError: If ``file`` is a path that cannot be stat'ed.
    """
    if isinstance(file, int):
        size: int = file
    else:
        size = Path(file).stat().st_size
        logger.trace("%s: %d bytes", file, size)
    return size <= max_size_mb * BYTES_PER_MB
