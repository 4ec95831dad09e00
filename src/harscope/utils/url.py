"""URL utility functions."""

from urllib.parse import urlparse


def extract_host(url: str) -> str:
    """Extract the hostname from a URL.

    Examples:
        https://API.Example.com:8443/users -> api.example.com
        http://user:pw@[::1]:8080/ -> ::1
        about:blank -> ""

    Args:
        url: Full URL

    Returns:
        Lower-cased hostname without port or userinfo, or empty string
        if the URL has no host or cannot be parsed
    """
    try:
        parsed = urlparse(url)
        return parsed.hostname or ""
    except ValueError:
        # Unbalanced IPv6 brackets and similar
        return ""


def extract_scheme(url: str) -> str:
    """Extract the scheme from a URL.

    Args:
        url: Full URL

    Returns:
        Lower-cased scheme (http, https, wss, data...), or empty string
    """
    try:
        return urlparse(url).scheme.lower()
    except ValueError:
        return ""
