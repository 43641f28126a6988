from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping

PropertyId = str


@dataclass(frozen=True)
class Property:
    id: PropertyId
    name: str


@dataclass(frozen=True)
class CatalogEntry:
    """A property together with the set of dates it can be booked on."""

    property: Property
    slots: frozenset[date] = field(default_factory=frozenset)

    @classmethod
    def build(cls, property_id: PropertyId, name: str, slots: Iterable[date]) -> "CatalogEntry":
        return cls(property=Property(id=property_id, name=name), slots=frozenset(slots))


Catalog = Mapping[PropertyId, CatalogEntry]
