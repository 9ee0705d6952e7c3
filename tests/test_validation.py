"""Tests for calendar argument validation."""

import pytest

from core.validation import (
    CalendarValidationError,
    InvalidEvents,
    InvalidMonth,
    InvalidWeekStart,
    InvalidYear,
    validate_arguments,
    validate_week_start,
)
from services.grid import generate


@pytest.mark.parametrize("year", [None, 0, -1, "", "abc", "20x4", 3.5, True, 10000])
def test_invalid_year(year):
    with pytest.raises(InvalidYear):
        validate_arguments(year, 5, {})


@pytest.mark.parametrize("month", [None, 0, 13, "", "May", 1.5, False])
def test_invalid_month(month):
    with pytest.raises(InvalidMonth):
        validate_arguments(2024, month, {})


@pytest.mark.parametrize("events", ["not-a-map", [1, 2], None, 42])
def test_invalid_events(events):
    with pytest.raises(InvalidEvents):
        validate_arguments(2024, 5, events)


def test_numeric_strings_accepted():
    validate_arguments("2024", "02", {})


def test_integral_floats_accepted():
    validate_arguments(2024.0, 2.0, {})


@pytest.mark.parametrize("year", [1, 9999, "0001", "9999"])
def test_full_year_range_accepted(year):
    validate_arguments(year, 1, {})


def test_year_checked_before_month():
    with pytest.raises(InvalidYear):
        validate_arguments(0, 13, "not-a-map")


def test_error_message_names_value():
    with pytest.raises(InvalidMonth, match='got "13"'):
        validate_arguments(2024, 13, {})


def test_errors_share_base_class():
    for error in (InvalidYear, InvalidMonth, InvalidEvents, InvalidWeekStart):
        assert issubclass(error, CalendarValidationError)
        assert issubclass(error, ValueError)


def test_generate_rejects_bad_arguments():
    with pytest.raises(InvalidYear):
        generate(0, 5, {})
    with pytest.raises(InvalidMonth):
        generate(2024, 13, {})
    with pytest.raises(InvalidEvents):
        generate(2024, 5, "not-a-map")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("monday", 0),
        ("Sunday", 6),
        ("wed", 2),
        (" SAT ", 5),
        (0, 0),
        (6, 6),
        ("3", 3),
    ],
)
def test_week_start(value, expected):
    assert validate_week_start(value) == expected


@pytest.mark.parametrize("value", ["mo", "funday", 7, -1, None, True, ""])
def test_invalid_week_start(value):
    with pytest.raises(InvalidWeekStart):
        validate_week_start(value)
