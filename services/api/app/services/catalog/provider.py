from __future__ import annotations

from typing import Protocol

from app.domain.property import Catalog, CatalogEntry, PropertyId


class CatalogProvider(Protocol):
    """Builds the initial catalog contents."""

    name: str

    def load(self) -> dict[PropertyId, CatalogEntry]: ...


class CatalogSnapshot(Protocol):
    """Read-only view of the catalog; the returned mapping never changes."""

    def get(self) -> Catalog: ...
