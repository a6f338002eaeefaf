"""CORS headers sent with every response."""

from typing import Dict

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Max-Age": "2592000",
    "Access-Control-Allow-Credentials": "true",
    # Lets the identity provider's sign-in popup talk back to the page
    "Cross-Origin-Opener-Policy": "same-origin-allow-popups",
}


def cors_headers() -> Dict[str, str]:
    """Return a fresh copy of the CORS headers."""
    return dict(CORS_HEADERS)
