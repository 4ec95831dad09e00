"""Pytest fixtures for harscope tests."""

import json

import pytest

from harscope.domains import get_extractor


def make_entry(started, method, url, headers=None, post_text=None, response_headers=None,
               response_text=None, cookies=None, query=None):
    """Build a minimal HAR entry."""
    request = {
        "method": method,
        "url": url,
        "headers": headers or [],
        "queryString": query or [],
        "cookies": cookies or [],
    }
    if post_text is not None:
        request["postData"] = {"mimeType": "application/x-www-form-urlencoded", "text": post_text}
    return {
        "startedDateTime": started,
        "request": request,
        "response": {
            "status": 200,
            "headers": response_headers or [],
            "cookies": [],
            "content": {"mimeType": "text/plain", "text": response_text or ""},
            "redirectURL": "",
        },
    }


@pytest.fixture
def sample_har_data():
    """Sample capture with TLD, ccSLD, IP-literal and host-less requests."""
    return {
        "log": {
            "version": "1.2",
            "creator": {"name": "pytest", "version": "1.0"},
            "entries": [
                make_entry(
                    "2024-01-01T10:00:00.000Z", "GET", "https://a.example.com/index.html",
                    headers=[{"name": "Authorization", "value": "Bearer s3cr3t-token"}],
                ),
                make_entry(
                    "2024-01-01T10:01:00.000Z", "GET", "https://b.example.com/api?token=s3cr3t-token",
                    query=[{"name": "token", "value": "s3cr3t-token"}],
                ),
                make_entry(
                    "2024-01-01T10:02:00.000Z", "POST", "http://example.com/login",
                    post_text="user=alice&password=hunter2",
                ),
                make_entry(
                    "2024-01-01T10:03:00.000Z", "GET", "https://test.co.uk/",
                    response_headers=[{"name": "X-Debug", "value": "aHVudGVyMg"}],
                ),
                make_entry(
                    "2024-01-01T10:04:00.000Z", "GET", "wss://10.0.0.1:8443/socket",
                ),
                make_entry(
                    "2024-01-01T10:05:00.000Z", "GET", "data:image/png;base64,iVBORw0KGgo",
                ),
            ],
        }
    }


@pytest.fixture
def sample_har_file(sample_har_data, tmp_path):
    """Write the sample capture to a temporary .har file."""
    har_file = tmp_path / "capture.har"
    with open(har_file, "w", encoding="utf-8") as f:
        json.dump(sample_har_data, f)
    return har_file


@pytest.fixture
def empty_har_file(tmp_path):
    """A capture without entries."""
    har_file = tmp_path / "empty.har"
    with open(har_file, "w", encoding="utf-8") as f:
        json.dump({"log": {"version": "1.2", "entries": []}}, f)
    return har_file


@pytest.fixture(scope="session")
def extractor():
    """Offline public suffix extractor shared by the tests."""
    return get_extractor()
