"""
Argument validation for calendar generation.

Every check runs before any date arithmetic, so a rejected call never leaves
partial state behind.
"""

from collections.abc import Mapping
from datetime import MAXYEAR, MINYEAR
from numbers import Integral

MIN_YEAR = MINYEAR
MAX_YEAR = MAXYEAR

WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class CalendarValidationError(ValueError):
    """Base class for rejected calendar arguments."""

    code = "VALIDATION_ERROR"


class InvalidYear(CalendarValidationError):
    code = "INVALID_YEAR"


class InvalidMonth(CalendarValidationError):
    code = "INVALID_MONTH"


class InvalidEvents(CalendarValidationError):
    code = "INVALID_EVENTS"


class InvalidWeekStart(CalendarValidationError):
    code = "INVALID_WEEK_START"


def as_number(value) -> int | None:
    """Return value as an int if it is integer-like, otherwise None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None


def validate_year(year) -> None:
    number = as_number(year)
    if number is None or not MIN_YEAR <= number <= MAX_YEAR:
        raise InvalidYear(
            f'Please supply the calendar with a valid year in the format "YYYY", got "{year}".'
        )


def validate_month(month) -> None:
    number = as_number(month)
    if number is None or not 1 <= number <= 12:
        raise InvalidMonth(
            f'Please supply the calendar with a valid month in the format "MM", got "{month}".'
        )


def validate_events(events) -> None:
    if not isinstance(events, Mapping):
        raise InvalidEvents(
            "Please supply the calendar with valid events, these should be a mapping "
            "of events with the day of the month as key."
        )


def validate_arguments(year, month, events) -> None:
    """
    Validate all generate() arguments.

    Raises:
        InvalidYear: year missing, non-numeric or out of range
        InvalidMonth: month missing, non-numeric or outside 1-12
        InvalidEvents: events is not a mapping
    """
    validate_year(year)
    validate_month(month)
    validate_events(events)


def validate_week_start(week_start) -> int:
    """
    Resolve a start-of-week setting to a weekday number (0=Monday .. 6=Sunday).

    Accepts a weekday name (case-insensitive, "mon" style abbreviations too)
    or a number.
    """
    number = as_number(week_start)
    if number is not None:
        if 0 <= number <= 6:
            return number
    elif isinstance(week_start, str):
        name = week_start.strip().lower()
        for index, weekday in enumerate(WEEKDAY_NAMES):
            if len(name) >= 3 and weekday.startswith(name):
                return index

    raise InvalidWeekStart(
        f'Please supply a valid start of the week (e.g. "monday" or 0-6), got "{week_start}".'
    )
