"""Calendar grid endpoints."""

import time
from collections.abc import Mapping
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import verify_api_key
from api.logging import RequestLog, log_request
from api.models.responses import CalendarRequest, CalendarResponse, ErrorCodes
from core import config
from core.validation import CalendarValidationError
from services.grid import generate
from services.presentation import build_calendar_view

router = APIRouter(prefix="/v1", dependencies=[Depends(verify_api_key)])


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def build_response(request: Request, year, month, events, week_start) -> CalendarResponse:
    """Generate the calendar, map it for display and log the request."""
    start_time = time.time()

    request_log = RequestLog(
        endpoint=request.url.path,
        method=request.method,
        client_ip=get_client_ip(request),
        year=None if year is None else str(year),
        month=None if month is None else str(month),
        week_start=None if week_start is None else str(week_start),
        event_days=len(events) if isinstance(events, Mapping) else None,
    )

    try:
        calendar = generate(year, month, events)
        view = build_calendar_view(calendar, week_start)

        request_log.status_code = 200
        request_log.rows_generated = len(view.body)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        return CalendarResponse.from_view(calendar, view)

    except CalendarValidationError as e:
        request_log.status_code = 422
        request_log.error_code = e.code
        request_log.error_message = str(e)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": "Calendar validation failed",
                "code": request_log.error_code,
                "details": [str(e)],
            },
        )

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        raise

    finally:
        if config.REQUEST_LOG_ENABLED:
            try:
                log_request(request_log)
            except Exception:
                # Don't fail the request if logging fails
                pass


@router.get("/calendar", response_model=CalendarResponse)
async def get_calendar(
    request: Request,
    year: str | None = None,
    month: str | None = None,
    week_start: str | None = None,
):
    """
    Month grid without events.

    Defaults to the current month when year and month are both omitted.
    """
    if year is None and month is None:
        today = date.today()
        year, month = today.year, today.month

    return build_response(request, year, month, {}, week_start)


@router.post("/calendar", response_model=CalendarResponse)
async def post_calendar(request: Request, body: CalendarRequest):
    """Month grid with the supplied events attached to their days."""
    return build_response(request, body.year, body.month, body.events, body.week_start)
