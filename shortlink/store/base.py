"""Abstract base class for short-link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any

from .models import ShortLinkRecord


class ShortLinkStoreBase(ABC):
    """Abstract base class for short-link storage operations.

    The service only talks to this interface, so a durable backend can
    replace the in-memory one without changing create/resolve/list.
    """

    @abstractmethod
    async def create_short_link(self, record: ShortLinkRecord) -> bool:
        """Store a new short link.

        Args:
            record: The record to insert

        Returns:
            True if created, False if the short code is already taken
        """
        pass

    @abstractmethod
    async def get_short_link(self, short_code: str) -> Optional[ShortLinkRecord]:
        """Get the record for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_short_links(self, owner_id: str) -> List[ShortLinkRecord]:
        """List all records created by an owner.

        Args:
            owner_id: The owner identifier to filter by

        Returns:
            Matching records in creation order (possibly empty)
        """
        pass

    @abstractmethod
    async def get_statistics(self) -> Dict[str, Any]:
        """Get store statistics (total_urls, total_owners)."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release store resources."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is usable."""
        pass
