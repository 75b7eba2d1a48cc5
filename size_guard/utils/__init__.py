"""Utility modules for size monitoring."""

from .formatters import format_file_size, format_path, format_percentage, format_timestamp

__all__ = ["format_file_size", "format_path", "format_percentage", "format_timestamp"]
