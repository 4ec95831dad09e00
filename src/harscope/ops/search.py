"""Literal and base64 substring search across HAR request/response fields.

Used to audit captures for leaked secrets: a token typed into a form may
show up verbatim in a query string or, encoded, in a Basic auth header.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any, Callable

from ..har.loader import entries, entry_part, request_url


@dataclass
class SearchMatch:
    """An entry that contains the search string."""

    request_num: int  # 1-based position in the (filtered) capture
    time: str
    url: str
    method: str
    in_fields: list[str] = field(default_factory=list)
    encoding: str = "plain"


def _name_values(items: Any) -> list[str]:
    """Flatten a HAR [{name, value}] list into searchable strings."""
    texts = []
    if isinstance(items, list):
        for item in items:
            if isinstance(item, dict):
                texts.append(str(item.get("name", "")))
                texts.append(str(item.get("value", "")))
    return texts


def _post_data(request: dict) -> list[str]:
    post = entry_part(request, "postData")
    texts = [str(post.get("text") or "")]
    texts.extend(_name_values(post.get("params")))
    return texts


def _content(response: dict) -> list[str]:
    content = entry_part(response, "content")
    return [str(content.get("text") or "")]


# (field name, extractor) pairs, in the order matches are reported
FIELDS: list[tuple[str, Callable[[dict], list[str]]]] = [
    ("url", lambda e: [request_url(e)]),
    ("request.headers", lambda e: _name_values(entry_part(e, "request").get("headers"))),
    ("request.queryString", lambda e: _name_values(entry_part(e, "request").get("queryString"))),
    ("request.cookies", lambda e: _name_values(entry_part(e, "request").get("cookies"))),
    ("request.postData", lambda e: _post_data(entry_part(e, "request"))),
    ("response.headers", lambda e: _name_values(entry_part(e, "response").get("headers"))),
    ("response.cookies", lambda e: _name_values(entry_part(e, "response").get("cookies"))),
    ("response.content", lambda e: _content(entry_part(e, "response"))),
    ("response.redirectURL", lambda e: [str(entry_part(e, "response").get("redirectURL") or "")]),
]


def encode_needle(needle: str) -> str:
    """Standard base64 of the UTF-8 needle, without "=" padding.

    Padding is dropped so the encoded form still matches when the secret
    is followed by more data in the same encoded blob.
    """
    return base64.b64encode(needle.encode("utf-8")).decode("ascii").rstrip("=")


def search_for(document: dict, needle: str, encoding: str = "plain") -> list[SearchMatch]:
    """Find every entry containing needle (case-sensitive).

    Args:
        document: Loaded HAR document
        needle: Substring to look for
        encoding: Label stored on the matches

    Returns:
        One SearchMatch per matching entry, in capture order

    Raises:
        ValueError: needle is empty
    """
    if not needle:
        raise ValueError("Search string must not be empty")

    matches = []
    for index, entry in enumerate(entries(document)):
        in_fields = [
            name for name, extract in FIELDS
            if any(needle in text for text in extract(entry))
        ]
        if not in_fields:
            continue

        request = entry_part(entry, "request")
        matches.append(SearchMatch(
            request_num=index + 1,
            time=entry.get("startedDateTime", ""),
            url=request_url(entry),
            method=request.get("method") or "",
            in_fields=in_fields,
            encoding=encoding,
        ))
    return matches


def search_all(document: dict, needle: str, include_base64: bool = True) -> list[SearchMatch]:
    """Plain matches followed by matches of the base64-encoded needle."""
    matches = search_for(document, needle, "plain")
    if not include_base64:
        return matches
    encoded = encode_needle(needle)
    if encoded != needle:
        matches.extend(search_for(document, encoded, "base64"))
    return matches
