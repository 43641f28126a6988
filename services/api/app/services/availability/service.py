from __future__ import annotations

import asyncio
import logging
from datetime import date
from functools import partial

from app.services.availability import pagination
from app.services.availability.cancellation import CancellationToken
from app.services.availability.matcher import match_entry, requested_dates
from app.services.availability.ordering import order_matches
from app.services.availability.types import AvailabilityResult, HomeMatch
from app.services.catalog.provider import CatalogSnapshot

logger = logging.getLogger(__name__)


class AvailabilityQueryService:
    """Answers "which homes have a free night in [start, end]?" for one page at a time.

    Every call reads the current catalog snapshot once and builds all of its
    working state privately, so any number of queries can run at the same
    time against the same catalog.
    """

    def __init__(self, catalog: CatalogSnapshot, *, cancel_check_every: int = 1):
        if cancel_check_every < 1:
            raise ValueError("cancel_check_every must be >= 1")
        self._catalog = catalog
        self._cancel_check_every = cancel_check_every

    def query(
        self,
        start: date,
        end: date,
        page: int | None = None,
        page_size: int | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> AvailabilityResult:
        """Run the query synchronously.

        Raises QueryCancelled if ``cancel`` fires during the scan; no partial
        result is returned in that case.
        """
        logger.info(
            "Handling available homes query",
            extra={"start": start.isoformat(), "end": end.isoformat(), "page": page, "page_size": page_size},
        )

        requested = requested_dates(start, end)
        snapshot = self._catalog.get()
        every = self._cancel_check_every

        matches: list[HomeMatch] = []
        for i, entry in enumerate(snapshot.values()):
            if cancel is not None and i % every == 0:
                cancel.raise_if_cancelled()
            m = match_entry(requested, entry)
            if m is not None:
                matches.append(m)

        if cancel is not None:
            cancel.raise_if_cancelled()

        ordered = order_matches(matches)

        p, size = pagination.normalize(page, page_size)
        total = len(ordered)
        result = AvailabilityResult(
            page=p,
            page_size=size,
            total=total,
            total_pages=pagination.total_pages(total, size),
            homes=pagination.slice_page(ordered, p, size),
        )

        logger.info(
            "Handled available homes query: %d matches, page %d/%d",
            result.total,
            result.page,
            result.total_pages,
        )
        return result

    async def query_async(
        self,
        start: date,
        end: date,
        page: int | None = None,
        page_size: int | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> AvailabilityResult:
        """Run ``query`` on a worker thread without blocking the event loop.

        If the awaiting task is cancelled the token is cancelled as well, so
        the scan stops at its next check instead of running to completion.
        """
        token = cancel or CancellationToken()
        loop = asyncio.get_running_loop()
        fut = loop.run_in_executor(
            None, partial(self.query, start, end, page, page_size, cancel=token)
        )
        try:
            return await fut
        except asyncio.CancelledError:
            token.cancel()
            raise
