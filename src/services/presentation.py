"""
Presentation mapping: turns a generated calendar into header and body rows
ready for a renderer.

No markup is produced here. Rendering is left to any object implementing
CalendarRenderer.
"""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from core.config import (
    CALENDAR_WEEK_START,
    MONTH_LABEL_FORMAT,
    NAV_LINK_TEMPLATE,
    WEEKDAY_LABEL_FORMAT,
)
from core.validation import validate_week_start
from models.calendar import Calendar, CalendarDate, EventMap, events_for_day, shift_month
from models.view import (
    WEEK_LENGTH,
    CalendarView,
    Cell,
    CellKind,
    GridBody,
    GridRow,
    HeaderBlock,
    NavLink,
    WeekdayLabel,
)
from services.grid import days_after_last, days_before_first


class CalendarRenderer(Protocol):
    """Anything that can turn a calendar view into output, e.g. an HTML template."""

    def render(self, view: CalendarView) -> str: ...


def resolve_week_start(week_start=None) -> int:
    """Use the given start-of-week, or the configured one."""
    if week_start is None:
        week_start = CALENDAR_WEEK_START
    return validate_week_start(week_start)


# =============================================================================
# HEADER
# =============================================================================


def generate_link(year: int, month: int) -> NavLink:
    """Navigation link for a month."""
    return NavLink(year=year, month=month, href=NAV_LINK_TEMPLATE.format(year=year, month=month))


def build_header(
    first_day: CalendarDate,
    week_start: int = 0,
    month_format: str = MONTH_LABEL_FORMAT,
    weekday_format: str = WEEKDAY_LABEL_FORMAT,
) -> HeaderBlock:
    """
    Build the header block: prev/next links, month label and weekday labels.

    Weekday labels start at the first day of first_day's week. When that week
    begins before 0001-01-01 the following week supplies the labels instead.
    """
    prev_year, prev_month = shift_month(first_day.year, first_day.month, -1)
    next_year, next_month = shift_month(first_day.year, first_day.month, 1)

    before = days_before_first(first_day, week_start)
    if (first_day.value - date.min).days >= before:
        week_day = first_day.sub_days(before)
    else:
        week_day = first_day.add_days(7 - before)

    weekday_labels = []
    for _ in range(WEEK_LENGTH):
        weekday_labels.append(WeekdayLabel(day=week_day, label=week_day.format(weekday_format)))
        week_day = week_day.add_days(1)

    return HeaderBlock(
        month_label=first_day.format(month_format),
        prev_link=generate_link(prev_year, prev_month),
        next_link=generate_link(next_year, next_month),
        weekday_labels=tuple(weekday_labels),
    )


# =============================================================================
# BODY
# =============================================================================


def day_cell(day: CalendarDate, events: EventMap, today: date | None = None) -> Cell:
    kind = CellKind.TODAY if day.is_today(today) else CellKind.NORMAL
    return Cell(kind=kind, day=day, events=events_for_day(events, day.day))


def split_rows(cells: Sequence[Cell]) -> GridBody:
    """Split a flat cell sequence into rows of seven."""
    return [
        GridRow(tuple(cells[start:start + WEEK_LENGTH]))
        for start in range(0, len(cells), WEEK_LENGTH)
    ]


def build_body(
    days: Sequence[CalendarDate],
    events: EventMap,
    week_start: int = 0,
    today: date | None = None,
) -> GridBody:
    """
    Build the body rows: filler before the first day, one cell per day,
    filler after the last day.
    """
    before = days_before_first(days[0], week_start)
    after = days_after_last(days[-1], week_start)

    cells = [Cell(CellKind.FILLER) for _ in range(before)]
    cells.extend(day_cell(day, events, today) for day in days)
    cells.extend(Cell(CellKind.FILLER) for _ in range(after))

    return split_rows(cells)


# =============================================================================
# VIEW
# =============================================================================


def build_calendar_view(
    calendar: Calendar,
    week_start=None,
    today: date | None = None,
) -> CalendarView:
    """Create the header and body for a generated calendar."""
    week_start = resolve_week_start(week_start)
    # A single reference date keeps "today" stable across the whole body
    today = today or date.today()

    return CalendarView(
        header=build_header(calendar.first_day, week_start),
        body=build_body(calendar.days, calendar.events, week_start, today),
    )


def render_calendar(
    calendar: Calendar,
    renderer: CalendarRenderer,
    week_start=None,
    today: date | None = None,
) -> str:
    """Build the view for a calendar and hand it to the renderer."""
    return renderer.render(build_calendar_view(calendar, week_start, today))
