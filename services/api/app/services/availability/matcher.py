from __future__ import annotations

from datetime import date
from typing import AbstractSet

from app.domain.date_range import closed_range
from app.domain.property import CatalogEntry
from app.services.availability.types import HomeMatch


def requested_dates(start: date, end: date) -> frozenset[date]:
    """Materialize the requested range once so each property costs one set intersection."""
    return frozenset(closed_range(start, end))


def match_entry(requested: AbstractSet[date], entry: CatalogEntry) -> HomeMatch | None:
    """Return the home with the requested dates it is available on, or None if there are none.

    The entry's stored slots are the dates the home can be booked on.
    """
    if not requested or not entry.slots:
        return None

    overlap = entry.slots & requested
    if not overlap:
        return None

    return HomeMatch(
        home_id=entry.property.id,
        home_name=entry.property.name,
        available_slots=tuple(sorted(overlap)),
    )
