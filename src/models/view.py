"""
View models handed to a renderer: the header block and the grid body.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from models.calendar import CalendarDate

WEEK_LENGTH = 7


class CellKind(str, Enum):
    FILLER = "filler"
    NORMAL = "normal"
    TODAY = "today"


class HeaderKind(str, Enum):
    PREV_LINK = "prev_link"
    MONTH_LABEL = "month_label"
    NEXT_LINK = "next_link"
    WEEKDAY_LABEL = "weekday_label"


@dataclass(frozen=True)
class Cell:
    """One grid cell. Filler cells have no day and no events."""

    kind: CellKind
    day: CalendarDate | None = None
    events: list = field(default_factory=list)

    @property
    def is_filler(self) -> bool:
        return self.kind is CellKind.FILLER


@dataclass(frozen=True)
class GridRow:
    """A week of exactly seven cells."""

    cells: tuple[Cell, ...]

    def __post_init__(self):
        if len(self.cells) != WEEK_LENGTH:
            raise ValueError(f"A grid row needs {WEEK_LENGTH} cells, got {len(self.cells)}")

    def by_column(self) -> dict[int, Cell]:
        """Map column position 1..7 to its cell."""
        return dict(enumerate(self.cells, start=1))

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


GridBody = list[GridRow]


@dataclass(frozen=True)
class NavLink:
    """Navigation target for another month."""

    year: int
    month: int
    href: str


@dataclass(frozen=True)
class WeekdayLabel:
    day: CalendarDate
    label: str


@dataclass(frozen=True)
class HeaderItem:
    kind: HeaderKind
    data: Any


@dataclass(frozen=True)
class HeaderBlock:
    month_label: str
    prev_link: NavLink
    next_link: NavLink
    weekday_labels: tuple[WeekdayLabel, ...]

    def rows(self) -> list[list[HeaderItem]]:
        """Header as two rows: [prev, month, next] and the seven weekday labels."""
        navigation = [
            HeaderItem(HeaderKind.PREV_LINK, self.prev_link),
            HeaderItem(HeaderKind.MONTH_LABEL, self.month_label),
            HeaderItem(HeaderKind.NEXT_LINK, self.next_link),
        ]
        weekdays = [HeaderItem(HeaderKind.WEEKDAY_LABEL, label) for label in self.weekday_labels]
        return [navigation, weekdays]

    def items(self) -> list[HeaderItem]:
        return [item for row in self.rows() for item in row]


@dataclass(frozen=True)
class CalendarView:
    """Everything a renderer needs to draw one month."""

    header: HeaderBlock
    body: GridBody

    def cells(self) -> list[Cell]:
        return [cell for row in self.body for cell in row]
