"""HAR loading and time-window filtering."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import IO, Union


class HarLoadError(Exception):
    """Exception raised when a HAR document cannot be loaded or filtered."""

    pass


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware datetime.

    HAR writers emit a trailing "Z" for UTC, which fromisoformat() only
    accepts from Python 3.11. Naive values are taken as local time.

    Raises:
        ValueError: value is not an ISO 8601 date-time
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment


def load_har(source: Union[str, Path, IO[str]]) -> dict:
    """Load and validate a HAR document.

    Args:
        source: Path to the HAR file, or an open text stream (stdin)

    Returns:
        The parsed HAR mapping

    Raises:
        HarLoadError: Unreadable input, invalid JSON, or no log.entries list
    """
    is_stream = hasattr(source, "read")
    name = getattr(source, "name", "<stdin>") if is_stream else str(source)

    try:
        if is_stream:
            data = json.load(source)
        else:
            with open(Path(source), "r", encoding="utf-8") as f:
                data = json.load(f)
    except json.JSONDecodeError as e:
        raise HarLoadError(f"Could not parse '{name}' as JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise HarLoadError(f"'{name}' is not UTF-8 text: {e}") from e
    except OSError as e:
        raise HarLoadError(f"Cannot read HAR file '{name}': {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("log"), dict):
        raise HarLoadError(f"Invalid HAR file '{name}': missing 'log' object")
    if not isinstance(data["log"].get("entries"), list):
        raise HarLoadError(f"Invalid HAR file '{name}': missing 'log.entries' list")

    return data


def entries(document: dict) -> list[dict]:
    """Return the entry objects of a loaded HAR document.

    Items of log.entries that are not JSON objects are left out.
    """
    return [entry for entry in document.get("log", {}).get("entries", []) if isinstance(entry, dict)]


def entry_part(entry: dict, name: str) -> dict:
    """Return entry[name] (request, response, postData...) when it is an object.

    Absent, null and non-object values give an empty dict.
    """
    part = entry.get(name)
    return part if isinstance(part, dict) else {}


def request_url(entry: dict) -> str:
    """Return the request URL of an entry, or "" when it has none."""
    url = entry_part(entry, "request").get("url")
    return url if isinstance(url, str) else ""


def filter_by_time(document: dict, moment: datetime, keep_after: bool) -> int:
    """Drop entries on the wrong side of moment, in place.

    Args:
        document: Loaded HAR document
        moment: Boundary instant; entries exactly at it are kept
        keep_after: True keeps entries at or after moment (--after),
            False keeps entries at or before moment (--before)

    Returns:
        Number of entries removed

    Raises:
        HarLoadError: An entry has no parseable startedDateTime

    Items that are not JSON objects are dropped and counted as removed.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()

    raw = document.get("log", {}).get("entries", [])
    kept = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            continue
        started = entry.get("startedDateTime")
        if not isinstance(started, str):
            raise HarLoadError(f"Invalid HAR file: entry {index + 1} has no startedDateTime")
        try:
            when = parse_timestamp(started)
        except ValueError as e:
            raise HarLoadError(f"Invalid HAR file: entry {index + 1} has bad startedDateTime '{started}'") from e

        if keep_after and when >= moment:
            kept.append(entry)
        elif not keep_after and when <= moment:
            kept.append(entry)

    removed = len(raw) - len(kept)
    document["log"]["entries"] = kept
    return removed
