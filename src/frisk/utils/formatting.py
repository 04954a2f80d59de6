from __future__ import annotations

"""
Human-readable size formatting.
"""

from frisk.domain.constants import SIZE_UNITS


def format_size(size_bytes: int) -> str:
    """
    Convert a byte count into a binary-unit string.

    Uses integer division by 1024, so values are truncated, never rounded:
    1536 bytes renders as "1 KB". Stops at the largest unit (YB).

    Args:
        size_bytes: Non-negative byte count.

    Returns:
        str: Formatted size, e.g. "12 MB".
    """
    if size_bytes < 0:
        raise ValueError(f"Size cannot be negative: {size_bytes}")

    value = int(size_bytes)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS) - 1:
        value //= 1024
        index += 1

    return f"{value} {SIZE_UNITS[index]}"
