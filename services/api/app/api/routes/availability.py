from __future__ import annotations

import asyncio
import contextlib

from app.api.deps import get_query_service
from app.api.links import build_link_header
from app.api.rate_limit import rate_limiter
from app.core.config import settings
from app.schemas.availability import AvailableHomesOut
from app.services.availability.cancellation import CancellationToken
from app.services.availability.service import AvailabilityQueryService
from app.services.availability.validation import parse_date_range, validate_query
from fastapi import APIRouter, Depends, Query, Request, Response

router = APIRouter(prefix="/api", tags=["availability"])


async def _cancel_on_disconnect(
    request: Request, token: CancellationToken, done: asyncio.Event
) -> None:
    # Stopped through `done` rather than Task.cancel(): a cancel delivered while
    # inside is_disconnected() can be absorbed by its cancel scope.
    while not token.cancelled and not done.is_set():
        if await request.is_disconnected():
            token.cancel()
            return
        with contextlib.suppress(asyncio.TimeoutError):
            await asyncio.wait_for(done.wait(), settings.disconnect_poll_interval_secs)


@router.get(
    "/available-homes",
    response_model=AvailableHomesOut,
    dependencies=[
        Depends(
            rate_limiter(
                "available_homes",
                limit=settings.rate_limit_availability_per_window,
                window_seconds=settings.rate_limit_window_seconds,
            )
        )
    ],
)
async def get_available_homes(
    request: Request,
    response: Response,
    start_date: str = Query(alias="startDate"),
    end_date: str = Query(alias="endDate"),
    page: int | None = Query(default=None),
    page_size: int | None = Query(default=None, alias="pageSize"),
    service: AvailabilityQueryService = Depends(get_query_service),
) -> AvailableHomesOut:
    start, end = parse_date_range(start_date, end_date)
    validate_query(
        start,
        end,
        page,
        page_size,
        max_range_days=settings.availability_max_range_days,
    )

    token = CancellationToken()
    done = asyncio.Event()
    watcher = asyncio.create_task(_cancel_on_disconnect(request, token, done))
    try:
        result = await service.query_async(start, end, page, page_size, cancel=token)
    finally:
        done.set()
        await watcher

    base_url = str(request.url.replace(query=""))
    response.headers["Link"] = build_link_header(
        base_url,
        start=start,
        end=end,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )
    response.headers["X-Total-Count"] = str(result.total)

    return AvailableHomesOut.from_result(result)
