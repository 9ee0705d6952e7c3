"""API Pydantic models."""

from .responses import (
    CalendarRequest,
    CalendarResponse,
    ErrorCodes,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ErrorCodes",
    "CalendarRequest",
    "CalendarResponse",
]
