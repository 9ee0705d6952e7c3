"""
Data models for calendar dates and generated calendars.

Event payloads are opaque: the calendar only associates them with a day of
the month and never looks inside them.
"""

import calendar as _calendar
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Generic, TypeVar

E = TypeVar("E")

# Day of month -> one event payload or a list of them
EventMap = Mapping[int, Any]


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Return (year, month) moved by the given number of months."""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def days_in_month(year: int, month: int) -> int:
    return _calendar.monthrange(year, month)[1]


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A single calendar day."""

    value: date

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(date(year, month, day))

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def day(self) -> int:
        return self.value.day

    @property
    def day_of_week(self) -> int:
        """Weekday number, 0=Monday .. 6=Sunday."""
        return self.value.weekday()

    def is_today(self, today: date | None = None) -> bool:
        """Check against the system clock, or against `today` when given."""
        return self.value == (today or date.today())

    def add_days(self, days: int) -> "CalendarDate":
        return CalendarDate(self.value + timedelta(days=days))

    def sub_days(self, days: int) -> "CalendarDate":
        return self.add_days(-days)

    def add_month(self) -> "CalendarDate":
        return self._shift_month(1)

    def sub_month(self) -> "CalendarDate":
        return self._shift_month(-1)

    def _shift_month(self, months: int) -> "CalendarDate":
        # Day is clamped to the target month's length (Jan 31 + 1 month = Feb 28/29)
        year, month = shift_month(self.year, self.month, months)
        day = min(self.day, days_in_month(year, month))
        return CalendarDate.of(year, month, day)

    def start_of_month(self) -> "CalendarDate":
        return CalendarDate(self.value.replace(day=1))

    def end_of_month(self) -> "CalendarDate":
        return CalendarDate(self.value.replace(day=days_in_month(self.year, self.month)))

    def start_of_week(self, week_start: int = 0) -> "CalendarDate":
        """First day of this date's week, for weeks starting on `week_start`."""
        return self.sub_days((self.day_of_week - week_start) % 7)

    def end_of_week(self, week_start: int = 0) -> "CalendarDate":
        """Last day of this date's week, for weeks starting on `week_start`."""
        return self.start_of_week(week_start).add_days(6)

    def format(self, fmt: str) -> str:
        return self.value.strftime(fmt)

    def isoformat(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.isoformat()


def events_for_day(events: EventMap, day: int) -> list:
    """
    Look up the events for a day of the month.

    The day may be keyed as an int (14) or its string form ("14"). A missing
    key yields an empty list and a single payload is wrapped into a
    one-element list.
    """
    if day in events:
        value = events[day]
    elif str(day) in events:
        value = events[str(day)]
    else:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


@dataclass(frozen=True)
class Calendar(Generic[E]):
    """A generated month: its days in order plus the events keyed by day."""

    year: int
    month: int
    days: tuple[CalendarDate, ...]
    events: EventMap = field(default_factory=dict)

    @property
    def first_day(self) -> CalendarDate:
        return self.days[0]

    @property
    def last_day(self) -> CalendarDate:
        return self.days[-1]

    def events_for(self, day: int | CalendarDate) -> list[E]:
        if isinstance(day, CalendarDate):
            day = day.day
        return events_for_day(self.events, day)
