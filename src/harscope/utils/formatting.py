"""Text formatting utility functions."""


def truncate_text(text: str, max_length: int = 60, suffix: str = "...") -> str:
    """Truncate text to specified length with suffix.

    Args:
        text: Text to truncate
        max_length: Maximum length including suffix
        suffix: Suffix to append if truncated

    Returns:
        Truncated text with suffix, or original if short enough
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix


def format_fields(fields: list[str]) -> str:
    """Format a list of HAR field names the way search results show them.

    Example:
        ["url", "request.headers"] -> ["url", "request.headers"]
    """
    return "[" + ", ".join(f'"{name}"' for name in fields) + "]"
