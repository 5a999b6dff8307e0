"""Day selection state and neighbour highlighting - no I/O dependencies."""

from collections.abc import Iterable, Iterator
from datetime import date, timedelta
from enum import Enum

from .days import as_day


class NeighborSelection(Enum):
    """Which adjacent days of a cell are selected."""

    NONE = "none"
    PREVIOUS = "previous"
    NEXT = "next"
    BOTH = "both"


class SelectionSet:
    """Set of selected days at day granularity, in insertion order."""

    def __init__(self, days: Iterable[date] = ()):
        self._days: dict[date, None] = {}
        for d in days:
            self.add(d)

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return as_day(day) in self._days

    def __iter__(self) -> Iterator[date]:
        return iter(list(self._days))

    def __len__(self) -> int:
        return len(self._days)

    def __repr__(self) -> str:
        return f"SelectionSet({list(self._days)!r})"

    def add(self, day: date) -> bool:
        """Select a day. Returns False if it was already selected."""
        day = as_day(day)
        if day in self._days:
            return False
        self._days[day] = None
        return True

    def discard(self, day: date) -> bool:
        """Deselect a day. Returns False if it was not selected."""
        day = as_day(day)
        if day not in self._days:
            return False
        del self._days[day]
        return True

    def replace(self, days: Iterable[date]) -> list[date]:
        """Replace the whole selection, returning the days that were dropped."""
        previous = list(self._days)
        self._days = {}
        for d in days:
            self.add(d)
        return previous

    def clear(self) -> list[date]:
        return self.replace(())


def neighbor_selection(day: date, selected: Iterable[date] | SelectionSet) -> NeighborSelection:
    """
    Classify a day by whether the days right before and after it are selected.

    The day itself does not need to be selected; this drives the continuous
    selection band drawn across consecutive selected days.
    """
    if not isinstance(selected, SelectionSet):
        selected = SelectionSet(selected)
    day = as_day(day)
    try:
        has_previous = (day - timedelta(days=1)) in selected
    except OverflowError:
        has_previous = False
    try:
        has_next = (day + timedelta(days=1)) in selected
    except OverflowError:
        has_next = False

    if has_previous and has_next:
        return NeighborSelection.BOTH
    if has_previous:
        return NeighborSelection.PREVIOUS
    if has_next:
        return NeighborSelection.NEXT
    return NeighborSelection.NONE
