from datetime import date

from app.domain.property import CatalogEntry
from app.services.availability.matcher import match_entry, requested_dates


def test_requested_dates_materializes_range():
    req = requested_dates(date(2025, 7, 10), date(2025, 7, 12))
    assert req == frozenset({date(2025, 7, 10), date(2025, 7, 11), date(2025, 7, 12)})
    assert requested_dates(date(2025, 7, 12), date(2025, 7, 10)) == frozenset()


def test_match_returns_sorted_overlap():
    entry = CatalogEntry.build(
        "1",
        "Loft",
        [date(2025, 7, 12), date(2025, 7, 10), date(2025, 7, 20), date(2025, 7, 9)],
    )
    m = match_entry(requested_dates(date(2025, 7, 10), date(2025, 7, 15)), entry)

    assert m is not None
    assert m.home_id == "1"
    assert m.home_name == "Loft"
    assert m.available_slots == (date(2025, 7, 10), date(2025, 7, 12))


def test_no_overlap_is_excluded():
    entry = CatalogEntry.build("1", "Loft", [date(2025, 8, 1)])
    assert match_entry(requested_dates(date(2025, 7, 10), date(2025, 7, 15)), entry) is None


def test_empty_slots_or_empty_range():
    empty = CatalogEntry.build("1", "Loft", [])
    full = CatalogEntry.build("2", "Villa", [date(2025, 7, 10)])

    assert match_entry(requested_dates(date(2025, 7, 1), date(2025, 7, 31)), empty) is None
    assert match_entry(requested_dates(date(2025, 7, 31), date(2025, 7, 1)), full) is None


def test_range_boundaries_are_inclusive():
    entry = CatalogEntry.build("1", "Loft", [date(2025, 7, 10), date(2025, 7, 15)])
    m = match_entry(requested_dates(date(2025, 7, 10), date(2025, 7, 15)), entry)
    assert m is not None
    assert m.available_slots == (date(2025, 7, 10), date(2025, 7, 15))
