from __future__ import annotations

"""
Human-Readable Size Formatting.

Converts raw byte counts into base-1024 strings such as '1.50KB'.
"""

from typing import Tuple

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
DEFAULT_PRECISION = 2


def human_size_parts(num_bytes: int) -> Tuple[float, str]:
    """
    Scale a byte count to the largest unit keeping the value >= 1.

    Args:
        num_bytes: Size in bytes.

    Returns:
        Tuple[float, str]: Scaled value and its unit.

    Raises:
        ValueError: If the size is negative.
    """
    if num_bytes < 0:
        raise ValueError(f"Size must be non-negative, received {num_bytes}.")

    value = float(num_bytes)
    i = 0
    while value >= 1024 and i < len(SIZE_UNITS) - 1:
        value /= 1024
        i += 1
    return value, SIZE_UNITS[i]


def format_size(num_bytes: int, precision: int = DEFAULT_PRECISION) -> str:
    """
    Format a byte count with a fixed number of decimal places.

    Examples:
        >>> format_size(12)
        '12.00B'
        >>> format_size(1536)
        '1.50KB'
    """
    value, unit = human_size_parts(num_bytes)
    return f"{value:.{precision}f}{unit}"
