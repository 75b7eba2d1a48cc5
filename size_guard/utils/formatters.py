"""Formatting utilities for size monitor output."""

from datetime import datetime
from typing import Optional


SIZE_UNITS = ['B', 'KB', 'MB', 'GB', 'TB']


def format_file_size(size_bytes: float) -> str:
    """Format a byte count in human readable form.

    Scales by 1024 and stops at TB even for larger values.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Size string with two decimals, e.g. "1.50 KB".
    """
    size = float(size_bytes)
    unit_index = 0
    while size >= 1024.0 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024.0
        unit_index += 1
    return f"{size:.2f} {SIZE_UNITS[unit_index]}"


def format_percentage(percentage: Optional[float]) -> str:
    """Format a usage percentage, or "n/a" when there is none."""
    if percentage is None:
        return "n/a"
    return f"{percentage:.2f}%"


def format_timestamp(dt: datetime) -> str:
    """Format datetime for display."""
    return dt.strftime('%Y-%m-%d %H:%M:%S')


def format_path(path: str) -> str:
    """Make a path printable when it holds bytes that are not valid UTF-8."""
    return path.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace')
