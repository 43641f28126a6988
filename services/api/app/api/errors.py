from __future__ import annotations

import logging
from typing import Any

from app.core.config import settings
from app.middleware.correlation_id import CORRELATION_HEADER
from app.services.availability.errors import QueryCancelled, QueryValidationError
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from opentelemetry import trace
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json; charset=utf-8"

STATUS_CLIENT_CLOSED_REQUEST = 499

_BAD_REQUEST_TYPE = "https://datatracker.ietf.org/doc/html/rfc9110#name-400-bad-request"


def _trace_id() -> str | None:
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return None
    return format(ctx.trace_id, "032x")


def problem_response(
    request: Request,
    *,
    status: int,
    title: str,
    type_: str,
    detail: str | None = None,
    errors: dict[str, list[str]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    correlation_id = getattr(request.state, "correlation_id", None)
    body: dict[str, Any] = {
        "type": type_,
        "title": title,
        "status": status,
        "detail": detail,
        "instance": request.url.path,
        "traceId": _trace_id(),
        "correlationId": correlation_id,
    }
    if errors is not None:
        body["errors"] = errors

    out_headers = dict(headers or {})
    if correlation_id:
        out_headers[CORRELATION_HEADER] = correlation_id

    return JSONResponse(
        status_code=status,
        content=body,
        headers=out_headers,
        media_type=PROBLEM_CONTENT_TYPE,
    )


def _validation_problem(request: Request, errors: dict[str, list[str]]) -> JSONResponse:
    return problem_response(
        request,
        status=400,
        title="One or more validation errors occurred.",
        type_=_BAD_REQUEST_TYPE,
        errors=errors,
    )


async def query_validation_handler(request: Request, exc: QueryValidationError) -> JSONResponse:
    return _validation_problem(request, exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # FastAPI reports bad query parameters as ("query", "<name>"); key errors by parameter name.
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("query", "body", "path")]
        key = loc[-1] if loc else "request"
        errors.setdefault(key, []).append(err.get("msg", "Invalid value"))
    return _validation_problem(request, errors)


async def query_cancelled_handler(request: Request, exc: QueryCancelled) -> JSONResponse:
    logger.info("Request cancelled by client: %s", request.url.path)
    return problem_response(
        request,
        status=STATUS_CLIENT_CLOSED_REQUEST,
        title="Request was cancelled.",
        type_="about:blank",
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return problem_response(
        request,
        status=exc.status_code,
        title=exc.detail if isinstance(exc.detail, str) else "Request failed",
        type_=f"https://httpstatuses.io/{exc.status_code}",
        headers=exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception. CorrelationId=%s",
        getattr(request.state, "correlation_id", None),
        exc_info=exc,
    )
    return problem_response(
        request,
        status=500,
        title="An unexpected error occurred.",
        type_="https://httpstatuses.io/500",
        detail=repr(exc) if settings.is_dev else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QueryValidationError, query_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(QueryCancelled, query_cancelled_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
