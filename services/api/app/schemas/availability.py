from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.services.availability.types import AvailabilityResult, HomeMatch


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HomeOut(_CamelModel):
    home_id: str
    home_name: str
    available_slots: list[date]

    @classmethod
    def from_match(cls, m: HomeMatch) -> "HomeOut":
        return cls(
            home_id=m.home_id,
            home_name=m.home_name,
            available_slots=list(m.available_slots),
        )


class AvailableHomesOut(_CamelModel):
    status: str
    page: int
    page_size: int
    total: int
    total_pages: int
    homes: list[HomeOut]

    @classmethod
    def from_result(cls, r: AvailabilityResult) -> "AvailableHomesOut":
        return cls(
            status=r.status,
            page=r.page,
            page_size=r.page_size,
            total=r.total,
            total_pages=r.total_pages,
            homes=[HomeOut.from_match(m) for m in r.homes],
        )


class CatalogHealthOut(BaseModel):
    provider: str
    properties: int


class HealthOut(BaseModel):
    status: str
    catalog: CatalogHealthOut
