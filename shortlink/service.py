"""Business logic service for the short-link service."""

import logging
from typing import Optional, Dict, Any, List

from .shortcode import ShortCodeGenerator
from .store.base import ShortLinkStoreBase
from .store.models import ShortLinkRecord
from .errors import ShortLinkError, InvalidInputError, NotFoundError
from .common.validators import is_valid_url, is_present


class ShortLinkService:
    """Service layer for creating, resolving and listing short links."""

    def __init__(
        self,
        store: ShortLinkStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 5,
    ):
        """Initialize short-link service.

        Args:
            store: Store instance holding the mapping
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_collision_retries: Extra attempts when a generated code is taken
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries

    async def create_short_link(self, original_url: str, owner_id: str) -> Dict[str, Any]:
        """Create a new short link owned by ``owner_id``.

        Args:
            original_url: The original long URL
            owner_id: Opaque identifier of the creating user

        Returns:
            Dictionary with short_code, original_url, owner_id, created_at

        Raises:
            InvalidInputError: If a field is missing or the URL is malformed
            ShortLinkError: If no free short code could be generated
        """
        if not is_present(original_url) or not is_present(owner_id):
            raise InvalidInputError("URL and userId are required")

        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise InvalidInputError(f"Invalid URL format: {error}")

        # The store rejects taken codes, so a collision costs one more attempt
        for attempt in range(self.max_collision_retries + 1):
            record = ShortLinkRecord(
                short_code=self.generator.generate_random(),
                original_url=original_url,
                owner_id=owner_id,
            )
            if await self.store.create_short_link(record):
                if attempt:
                    self.logger.debug(f"Generated code after {attempt + 1} attempts: {record.short_code}")
                self.logger.info(f"Created short link: {record.short_code} -> {original_url}")
                return record.to_dict()

            self.logger.warning(f"Short code collision on {record.short_code}, retrying")

        raise ShortLinkError("Unable to generate unique short code after multiple attempts")

    async def resolve_short_link(self, short_code: str) -> str:
        """Get the original URL for a short code.

        Raises:
            NotFoundError: If the code is unknown
        """
        record = await self.store.get_short_link(short_code)

        if record is None:
            self.logger.warning(f"Short code not found: {short_code}")
            raise NotFoundError(short_code)

        self.logger.debug(f"Resolved short link: {short_code} -> {record.original_url}")
        return record.original_url

    async def list_short_links(self, owner_id: str) -> List[Dict[str, Any]]:
        """List the short links created by an owner, oldest first.

        Raises:
            InvalidInputError: If owner_id is missing
        """
        if not is_present(owner_id):
            raise InvalidInputError("userId is required")

        records = await self.store.list_short_links(owner_id)
        self.logger.debug(f"Listed {len(records)} short links for owner {owner_id}")
        return [record.to_dict() for record in records]

    async def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics."""
        return await self.store.get_statistics()

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check."""
        store_healthy = await self.store.health_check()
        return {
            "store": store_healthy,
            "overall": store_healthy,
        }

    async def close(self) -> None:
        """Close service resources."""
        await self.store.close()
