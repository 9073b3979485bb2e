"""
Utility functions for sizefmt.

Provides the human-readable byte-size formatter.
"""

import math
from typing import Union

from core.constants import SIZE_UNITS

__all__ = [
    "format_file_size",
]

# TB is defined in SIZE_UNITS but never displayed
_DISPLAY_UNITS = ("GB", "MB", "KB")


def format_file_size(size_bytes: Union[int, float]) -> str:
    """
    Format file size in human-readable format.

    Picks the largest of GB, MB or KB whose threshold the value reaches
    and renders it with two decimals. Anything below 1 KB is rendered
    as the raw value in bytes.

    Args:
        size_bytes: File size in bytes

    Returns:
        Human-readable size string (e.g., "1.50 GB", "512 B")
    """
    for unit in _DISPLAY_UNITS:
        threshold = SIZE_UNITS[unit]
        if size_bytes >= threshold:
            try:
                value = size_bytes / threshold
            except OverflowError:
                # int beyond float range
                value = math.inf
            return f"{value:.2f} {unit}"
    return f"{size_bytes} B"
