"""Process-local in-memory store for short links.

Contents live exactly as long as the process. Nothing is written anywhere
else, so a restart starts from an empty mapping.
"""

import logging
import threading
from typing import Optional, List, Dict, Any

from .base import ShortLinkStoreBase
from .models import ShortLinkRecord


class InMemoryShortLinkStore(ShortLinkStoreBase):
    """Dict-backed store keyed by short code.

    All access goes through a single lock so the mapping stays consistent
    when the host runs handlers on several threads.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._records: Dict[str, ShortLinkRecord] = {}
        self._lock = threading.Lock()
        self._closed = False

    async def create_short_link(self, record: ShortLinkRecord) -> bool:
        with self._lock:
            if record.short_code in self._records:
                return False
            self._records[record.short_code] = record

        self.logger.debug(f"Stored short link {record.short_code} for owner {record.owner_id}")
        return True

    async def get_short_link(self, short_code: str) -> Optional[ShortLinkRecord]:
        with self._lock:
            return self._records.get(short_code)

    async def list_short_links(self, owner_id: str) -> List[ShortLinkRecord]:
        # dicts iterate in insertion order, which is creation order here
        with self._lock:
            return [r for r in self._records.values() if r.owner_id == owner_id]

    async def get_statistics(self) -> Dict[str, Any]:
        with self._lock:
            total_urls = len(self._records)
            total_owners = len({r.owner_id for r in self._records.values()})

        return {
            "total_urls": total_urls,
            "total_owners": total_owners,
            "store": "memory",
        }

    async def close(self) -> None:
        self._closed = True
        self.logger.info(f"In-memory store closed, discarding {len(self._records)} short links")

    async def health_check(self) -> bool:
        return not self._closed

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
