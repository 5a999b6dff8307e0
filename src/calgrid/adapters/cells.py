"""Presentation adapter - maps pages onto day cell view models."""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from calgrid.core.days import DayRole, Page
from calgrid.core.selection import NeighborSelection, SelectionSet, neighbor_selection


@dataclass(frozen=True)
class DayCell:
    """Everything a grid cell needs to draw one day."""

    day: date
    day_number: str
    role: DayRole
    is_selected: bool
    is_current_day: bool
    neighbor_selection: NeighborSelection

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "role": self.role.value,
            "selected": self.is_selected,
            "today": self.is_current_day,
            "neighbor_selection": self.neighbor_selection.value,
        }


def build_cells(
    page: Page,
    selection: SelectionSet | Iterable[date],
    today: date | None = None,
) -> list[DayCell]:
    """Build one cell per day of the page, in page order."""
    if not isinstance(selection, SelectionSet):
        selection = SelectionSet(selection)
    return [
        DayCell(
            day=d.date,
            day_number=str(d.date.day),
            role=d.role,
            is_selected=d.date in selection,
            is_current_day=d.date == today,
            neighbor_selection=neighbor_selection(d.date, selection),
        )
        for d in page
    ]


def page_title(page: Page) -> str:
    """Month name and year of the page, e.g. "February 2024"."""
    anchor = page.first_current_day
    return f"{calendar.month_name[anchor.month]} {anchor.year}"
