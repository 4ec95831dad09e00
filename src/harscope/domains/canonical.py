"""Hostname canonicalization into ordered domain labels.

A hostname is split with the public suffix list so that the registrable
domain is known, then reversed so the top-level domain comes first:

    a.b.example.co.uk -> ["uk", "co", "example", "b", "a"]
    a.b.example.co.uk (merge_tld) -> ["example.co.uk", "b", "a"]
    co.uk -> ["uk", "co"]
"""

from __future__ import annotations

import ipaddress
import re
from functools import lru_cache
from typing import Optional

import tldextract

# Letters, digits, underscore (service labels) and hyphen
_LABEL_RE = re.compile(r"^[\w-]+$")


class MalformedHostError(ValueError):
    """Raised when a hostname cannot be split into domain labels."""

    def __init__(self, host: str, reason: str):
        super().__init__(f"Malformed host '{host}': {reason}")
        self.host = host
        self.reason = reason


@lru_cache(maxsize=None)
def get_extractor(cache_dir: Optional[str] = None) -> tldextract.TLDExtract:
    """Return the shared public suffix extractor.

    Uses the suffix list snapshot bundled with tldextract (no network
    fetch) and only the ICANN section, so private suffixes such as
    github.io are treated as ordinary registrable domains. Without
    cache_dir, tldextract picks its own cache location.
    """
    options = {}
    if cache_dir is not None:
        options["cache_dir"] = cache_dir
    return tldextract.TLDExtract(
        suffix_list_urls=(),
        fallback_to_snapshot=True,
        include_psl_private_domains=False,
        **options,
    )


def _is_ip_literal(host: str) -> bool:
    try:
        ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return False
    return True


def canonicalize(
    host: str,
    merge_tld: bool = False,
    extractor: Optional[tldextract.TLDExtract] = None,
) -> list[str]:
    """Split a hostname into labels, top-level domain first.

    Args:
        host: Hostname without scheme, port or path
        merge_tld: Fuse the public suffix and the registrable label
            into a single label (e.g. "example.com")
        extractor: Public suffix extractor, defaults to get_extractor()

    Returns:
        Labels ordered from the root of the DNS tree to the leftmost label

    Raises:
        MalformedHostError: Empty host, IP literal, invalid label or no
            recognised public suffix
    """
    normalized = host.strip().lower().rstrip(".")
    if not normalized:
        raise MalformedHostError(host, "empty host")
    if _is_ip_literal(normalized):
        raise MalformedHostError(host, "IP literal")

    labels = normalized.split(".")
    for label in labels:
        if not label:
            raise MalformedHostError(host, "empty label")
        if not _LABEL_RE.match(label):
            raise MalformedHostError(host, f"invalid label '{label}'")

    extractor = extractor or get_extractor()
    ext = extractor.extract_str(normalized)
    if not ext.suffix:
        raise MalformedHostError(host, "no public suffix")
    if not ext.domain:
        # The host is a public suffix itself (com, co.uk)
        return [ext.suffix] if merge_tld else list(reversed(ext.suffix.split(".")))

    if merge_tld:
        path = [f"{ext.domain}.{ext.suffix}"]
    else:
        path = list(reversed(ext.suffix.split(".")))
        path.append(ext.domain)

    if ext.subdomain:
        path.extend(reversed(ext.subdomain.split(".")))
    return path
