"""Validation utilities for the short-link service."""

from urllib.parse import urlparse
from typing import Any, Tuple

MAX_URL_LENGTH = 2048


def is_present(value: Any) -> bool:
    """True for any non-empty string; whitespace is a real value."""
    return isinstance(value, str) and value != ""


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not is_present(url):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    try:
        result = urlparse(url)

        # Check if scheme is http or https
        if result.scheme not in ["http", "https"]:
            return False, "URL must use http or https protocol"

        # Check if netloc (domain) exists
        if not result.hostname:
            return False, "URL must have a valid domain"

        # Accessing the port validates it
        result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"
