"""
Month grid construction: the days of a month and the week padding around them.
"""

from collections.abc import Mapping

from core.validation import validate_arguments
from models.calendar import Calendar, CalendarDate


def month_days(year: int, month: int) -> list[CalendarDate]:
    """
    Get the days of the given month in the given year.

    Steps one day at a time from the 1st up to the last day of the month,
    never past it, so December 9999 stays within the date range.
    """
    current = CalendarDate.of(year, month, 1)
    last_day = current.end_of_month()

    days = [current]
    while current < last_day:
        current = current.add_days(1)
        days.append(current)

    return days


def generate(year, month, events: Mapping | None = None) -> Calendar:
    """
    Generate the calendar for the given year and month.

    Args:
        year: Calendar year, 1-9999 (int, integral float or a string of digits)
        month: Calendar month, 1-12
        events: Mapping of day of month -> event payload or list of payloads.
            Keys may be ints (14) or their string form ("14").

    Raises:
        CalendarValidationError: If any argument is rejected
    """
    if events is None:
        events = {}

    validate_arguments(year, month, events)
    year, month = int(year), int(month)

    return Calendar(
        year=year,
        month=month,
        days=tuple(month_days(year, month)),
        events=events,
    )


def days_before_first(first_day: CalendarDate, week_start: int = 0) -> int:
    """Number of filler days from the start of the first week until the first day."""
    return (first_day.day_of_week - week_start) % 7


def days_after_last(last_day: CalendarDate, week_start: int = 0) -> int:
    """Number of filler days from the last day until the end of its week."""
    return (week_start + 6 - last_day.day_of_week) % 7
