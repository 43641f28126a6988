from __future__ import annotations

import re
from datetime import date

from app.services.availability.errors import QueryValidationError

DATE_FORMAT_MESSAGE = "Invalid date format. Use yyyy-MM-dd."

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: str) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` string; anything else returns None."""
    if not value or not _ISO_DATE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def parse_date_range(start: str, end: str) -> tuple[date, date]:
    s = parse_date(start)
    e = parse_date(end)
    if s is None or e is None:
        raise QueryValidationError({"dateRange": [DATE_FORMAT_MESSAGE]})
    return s, e


def validate_query(
    start: date,
    end: date,
    page: int | None,
    page_size: int | None,
    *,
    max_range_days: int,
) -> None:
    """Collect every rule violation and raise them together."""
    errors: dict[str, list[str]] = {}

    if end < start:
        errors.setdefault("endDate", []).append(
            "endDate must be on or after startDate."
        )
    elif (end - start).days > max_range_days:
        errors.setdefault("dateRange", []).append(
            f"Date range too large. Max {max_range_days} days."
        )

    if page is not None and page < 1:
        errors.setdefault("page", []).append("page must be greater than or equal to 1.")

    if page_size is not None and page_size <= 0:
        errors.setdefault("pageSize", []).append("pageSize must be greater than 0.")

    if errors:
        raise QueryValidationError(errors)
