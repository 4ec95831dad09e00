"""Scheme and request counters."""

from collections import Counter

from ..har.loader import entries, request_url
from ..utils.url import extract_scheme


def count_schemes(document: dict) -> Counter:
    """Count request URLs per scheme (http, https, wss, data...)."""
    counts: Counter = Counter()
    for entry in entries(document):
        counts[extract_scheme(request_url(entry))] += 1
    return counts


def sorted_scheme_counts(counts: Counter) -> list[tuple[str, int]]:
    """Most frequent scheme first; ties by scheme name."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def count_requests(document: dict) -> int:
    """Number of requests in the (filtered) capture."""
    return len(entries(document))
