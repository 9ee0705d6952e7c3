"""Pydantic request/response models for API endpoints."""

from dataclasses import asdict
from typing import Any

from pydantic import BaseModel

from models.calendar import Calendar
from models.view import CalendarView


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy"
    version: str
    timestamp: str  # ISO 8601 UTC


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """
    Error code constants.

    Validation failures use the `code` of the raised CalendarValidationError
    (INVALID_YEAR, INVALID_MONTH, INVALID_EVENTS, INVALID_WEEK_START).
    """

    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CalendarRequest(BaseModel):
    """Calendar generation request with events keyed by day of month."""

    year: int | str | None = None
    month: int | str | None = None
    events: Any = {}  # validated by the calendar generator, not by pydantic
    week_start: int | str | None = None


class NavLinkModel(BaseModel):
    year: int
    month: int
    href: str


class WeekdayLabelModel(BaseModel):
    date: str  # ISO 8601
    label: str


class HeaderModel(BaseModel):
    month_label: str
    prev_link: NavLinkModel
    next_link: NavLinkModel
    weekday_labels: list[WeekdayLabelModel]


class CellModel(BaseModel):
    kind: str  # "filler", "normal" or "today"
    date: str | None = None
    events: list[Any] = []


class CalendarResponse(BaseModel):
    """A month grid: header metadata plus week rows of seven cells."""

    year: int
    month: int
    header: HeaderModel
    body: list[list[CellModel]]

    @classmethod
    def from_view(cls, calendar: Calendar, view: CalendarView) -> "CalendarResponse":
        header = view.header
        return cls(
            year=calendar.year,
            month=calendar.month,
            header=HeaderModel(
                month_label=header.month_label,
                prev_link=NavLinkModel(**asdict(header.prev_link)),
                next_link=NavLinkModel(**asdict(header.next_link)),
                weekday_labels=[
                    WeekdayLabelModel(date=label.day.isoformat(), label=label.label)
                    for label in header.weekday_labels
                ],
            ),
            body=[
                [
                    CellModel(
                        kind=cell.kind.value,
                        date=cell.day.isoformat() if cell.day else None,
                        events=cell.events,
                    )
                    for cell in row
                ]
                for row in view.body
            ],
        )
