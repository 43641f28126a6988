from __future__ import annotations

from typing import Iterable

from app.services.availability.types import HomeMatch


def _upper_ordinal(s: str) -> str:
    # Upper-case one character at a time; characters whose upper form expands
    # (e.g. "ß" -> "SS") are kept as they are.
    return "".join(u if len(u := c.upper()) == 1 else c for c in s)


def sort_key(m: HomeMatch) -> tuple[str, str]:
    # Name ignoring case first, then the raw id so equal names still have a fixed order.
    return (_upper_ordinal(m.home_name), m.home_id)


def order_matches(matches: Iterable[HomeMatch]) -> list[HomeMatch]:
    return sorted(matches, key=sort_key)
