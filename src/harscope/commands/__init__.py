"""CLI commands for harscope."""

from .count_urls import count_urls
from .counting import count_schemes, count_requests
from .search_cmd import search_for
from .output_cmd import output
from .dnssec_cmd import dnssec_audit
from .config_cmd import config
from .version import version

__all__ = [
    "count_urls",
    "count_schemes",
    "count_requests",
    "search_for",
    "output",
    "dnssec_audit",
    "config",
    "version",
]
