#!/usr/bin/env python3
"""
Print the month grid for a month as JSON.

Usage:
    uv run python src/scripts/show_calendar.py --month 2024-02
    uv run python src/scripts/show_calendar.py --month 2024-02 --week-start sunday --events events.json

The events file is a JSON object keyed by day of month, e.g. {"14": ["Valentine's Day"]}.
"""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.models.responses import CalendarResponse
from core.validation import CalendarValidationError
from services.grid import generate
from services.presentation import build_calendar_view


def parse_month(month_str: str | None) -> tuple[str | int, str | int]:
    """Split YYYY-MM into (year, month). Uses the current month if None."""
    if not month_str:
        today = date.today()
        return today.year, today.month

    year, _, month = month_str.partition("-")
    return year, month


def load_events(events_path: Path | None) -> dict:
    if events_path is None:
        return {}
    with open(events_path, encoding="utf-8") as f:
        return json.load(f)


def main(month_str: str | None, week_start: str | None, events_path: Path | None):
    year, month = parse_month(month_str)
    calendar = generate(year, month, load_events(events_path))
    view = build_calendar_view(calendar, week_start)

    print(CalendarResponse.from_view(calendar, view).model_dump_json(indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a month calendar grid as JSON")
    parser.add_argument(
        "--month",
        help="Target month (YYYY-MM). Defaults to the current month.",
    )
    parser.add_argument(
        "--week-start",
        help="First day of the week (e.g. monday, sunday). Defaults to CALENDAR_WEEK_START.",
    )
    parser.add_argument(
        "--events",
        type=Path,
        help="JSON file with events keyed by day of month.",
    )
    return parser


def run(argv: list[str] | None = None):
    """Parse arguments and print the grid; bad input exits with a usage error."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        main(args.month, args.week_start, args.events)
    except CalendarValidationError as e:
        parser.error(str(e))


if __name__ == "__main__":
    run()
