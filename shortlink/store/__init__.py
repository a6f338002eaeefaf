"""Storage layer for the short-link service."""

from .base import ShortLinkStoreBase
from .memory import InMemoryShortLinkStore
from .models import ShortLinkRecord

__all__ = ["ShortLinkStoreBase", "InMemoryShortLinkStore", "ShortLinkRecord"]
