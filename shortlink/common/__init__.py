"""Common utilities for the short-link service."""

from .validators import is_valid_url, is_present
from .headers import cors_headers
from .logging_config import setup_logging
from .identity import owner_id_from_id_token

__all__ = [
    "is_valid_url",
    "is_present",
    "cors_headers",
    "setup_logging",
    "owner_id_from_id_token",
]
