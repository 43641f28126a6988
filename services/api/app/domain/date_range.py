from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

_ONE_DAY = timedelta(days=1)


def closed_range(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from ``start`` to ``end``, both inclusive.

    An inverted range (``end < start``) yields nothing.
    """
    d = start
    while d <= end:
        yield d
        d += _ONE_DAY
