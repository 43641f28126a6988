from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from app.domain.property import Catalog, CatalogEntry, PropertyId

logger = logging.getLogger(__name__)


class CatalogStore:
    """Holds the currently published catalog snapshot.

    Each snapshot is a read-only proxy over a private dict that nobody else
    references. ``publish`` swaps the reference, so readers that already
    called ``get`` keep iterating the snapshot they started with.
    """

    def __init__(self, entries: Mapping[PropertyId, CatalogEntry] | None = None, *, provider: str = "memory"):
        self.provider = provider
        self._snapshot: Catalog = MappingProxyType(dict(entries or {}))

    def get(self) -> Catalog:
        return self._snapshot

    def publish(self, entries: Mapping[PropertyId, CatalogEntry]) -> Catalog:
        snapshot: Catalog = MappingProxyType(dict(entries))
        self._snapshot = snapshot
        logger.info("Published catalog snapshot with %d properties", len(snapshot))
        return snapshot

    def __len__(self) -> int:
        return len(self._snapshot)
