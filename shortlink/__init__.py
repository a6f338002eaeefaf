"""Core business logic for the short-link service."""

from .shortcode import ShortCodeGenerator
from .service import ShortLinkService
from .errors import ShortLinkError, InvalidInputError, NotFoundError

__all__ = [
    "ShortCodeGenerator",
    "ShortLinkService",
    "ShortLinkError",
    "InvalidInputError",
    "NotFoundError",
]
