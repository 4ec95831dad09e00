"""Capture operations: counting, search and DNSSEC audit."""

from .counting import count_requests, count_schemes, sorted_scheme_counts
from .search import SearchMatch, encode_needle, search_all, search_for
from .dnssec import DnssecResult, audit_domain, audit_domains, list_domains, make_resolver

__all__ = [
    "count_requests",
    "count_schemes",
    "sorted_scheme_counts",
    "SearchMatch",
    "encode_needle",
    "search_all",
    "search_for",
    "DnssecResult",
    "audit_domain",
    "audit_domains",
    "list_domains",
    "make_resolver",
]
