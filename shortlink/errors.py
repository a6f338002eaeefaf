"""Exceptions raised by the short-link service."""


class ShortLinkError(Exception):
    """Base error for the short-link service. Surfaces as an internal error."""


class InvalidInputError(ShortLinkError):
    """Request data is missing or malformed."""


class NotFoundError(ShortLinkError):
    """No short link exists for the requested code."""

    def __init__(self, short_code: str):
        super().__init__(f"Short code '{short_code}' not found")
        self.short_code = short_code
