"""Visualization utilities for harscope."""

from .console import (
    format_domain_label,
    build_rich_tree,
    format_search_match,
)

__all__ = [
    "format_domain_label",
    "build_rich_tree",
    "format_search_match",
]
