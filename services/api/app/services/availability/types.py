from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

STATUS_OK = "OK"


@dataclass(frozen=True)
class HomeMatch:
    home_id: str
    home_name: str
    available_slots: tuple[date, ...]


@dataclass(frozen=True)
class AvailabilityResult:
    page: int
    page_size: int
    total: int
    total_pages: int
    homes: list[HomeMatch] = field(default_factory=list)
    status: str = STATUS_OK
