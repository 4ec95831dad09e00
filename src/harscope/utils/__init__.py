"""Utility functions for harscope."""

from .url import extract_host, extract_scheme
from .formatting import truncate_text, format_fields

__all__ = [
    "extract_host",
    "extract_scheme",
    "truncate_text",
    "format_fields",
]
