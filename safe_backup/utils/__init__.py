"""Utility modules for safe backup."""

from .formatters import format_file_size, format_timestamp, truncate_string

__all__ = ["format_file_size", "format_timestamp", "truncate_string"]
