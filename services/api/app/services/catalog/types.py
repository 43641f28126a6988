from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from app.domain.property import CatalogEntry


class FixtureProperty(BaseModel):
    id: str = Field(min_length=1)
    name: str
    slots: list[date] = Field(default_factory=list)

    def to_entry(self) -> CatalogEntry:
        return CatalogEntry.build(self.id, self.name, self.slots)


class FixtureCatalog(BaseModel):
    provider: str = "fixture"
    properties: list[FixtureProperty] = Field(default_factory=list)
