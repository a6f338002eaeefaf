"""Data models for the short-link service."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class ShortLinkRecord:
    """Represents one short code mapping. Never mutated after creation."""

    short_code: str
    original_url: str
    owner_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "short_code": self.short_code,
            "original_url": self.original_url,
            "owner_id": self.owner_id,
            "created_at": self.created_at,
        }
