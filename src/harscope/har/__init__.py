"""HAR document loading for harscope."""

from .loader import (
    HarLoadError,
    entries,
    entry_part,
    filter_by_time,
    load_har,
    parse_timestamp,
    request_url,
)

__all__ = [
    "HarLoadError",
    "entries",
    "entry_part",
    "filter_by_time",
    "load_har",
    "parse_timestamp",
    "request_url",
]
