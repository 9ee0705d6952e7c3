"""FastAPI dependencies for the calendar endpoints."""

import secrets

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from api.models.responses import ErrorCodes, ErrorResponse
from core import config

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def auth_error(status_code: int, message: str, code: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=message, code=code).model_dump(),
    )


async def verify_api_key(api_key: str | None = Security(api_key_header)) -> str:
    """
    Check the X-API-Key header against CALENDAR_API_KEY.

    A missing header is treated like a wrong key (401), so clients get the
    standard error body either way.
    """
    expected = config.CALENDAR_API_KEY
    if not expected:
        raise auth_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "API key not configured on server",
            ErrorCodes.INTERNAL_ERROR,
        )

    if not api_key or not secrets.compare_digest(api_key, expected):
        raise auth_error(
            status.HTTP_401_UNAUTHORIZED,
            "Invalid or missing API key",
            ErrorCodes.UNAUTHORIZED,
        )

    return api_key
