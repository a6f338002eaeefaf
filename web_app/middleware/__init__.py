"""Middleware for the short-link web app."""

from .headers import CORSHeadersMiddleware
from .logging import LoggingMiddleware
from .errors import ErrorHandlingMiddleware, register_exception_handlers

__all__ = [
    "CORSHeadersMiddleware",
    "LoggingMiddleware",
    "ErrorHandlingMiddleware",
    "register_exception_handlers",
]
