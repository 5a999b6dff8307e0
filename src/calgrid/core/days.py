"""Pure calendar day/page domain model - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class Granularity(Enum):
    """Period covered by a single page."""

    MONTH = "month"
    WEEK = "week"


class DayRole(Enum):
    """Role of a day relative to the page it appears in."""

    PREVIOUS_PERIOD = "previous"
    CURRENT = "current"
    NEXT_PERIOD = "next"


def as_day(value: date) -> date:
    """Truncate a date or datetime to day granularity."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class CalendarDay:
    """A single day tagged with its role on a page."""

    date: date
    role: DayRole

    @property
    def is_current(self) -> bool:
        return self.role is DayRole.CURRENT


@dataclass(frozen=True)
class Page:
    """One screenful of days (a month or a week), padded to whole weeks."""

    granularity: Granularity
    days: tuple[CalendarDay, ...]

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self):
        return iter(self.days)

    def _with_role(self, role: DayRole) -> list[date]:
        return [d.date for d in self.days if d.role is role]

    @property
    def previous_days(self) -> list[date]:
        return self._with_role(DayRole.PREVIOUS_PERIOD)

    @property
    def current_days(self) -> list[date]:
        return self._with_role(DayRole.CURRENT)

    @property
    def next_days(self) -> list[date]:
        return self._with_role(DayRole.NEXT_PERIOD)

    @property
    def dates(self) -> list[date]:
        return [d.date for d in self.days]

    @property
    def first_current_day(self) -> date:
        """First day with the current role; used as the page's anchor date."""
        return next(d.date for d in self.days if d.is_current)

    def contains(self, day: date, role: DayRole | None = None) -> bool:
        """Check if a day is on this page, optionally with a given role."""
        day = as_day(day)
        return any(d.date == day and (role is None or d.role is role) for d in self.days)


@dataclass(frozen=True)
class Window:
    """Pages kept around the displayed date, centred on the reference page."""

    reference: date
    granularity: Granularity
    pages: tuple[Page, ...]

    def __len__(self) -> int:
        return len(self.pages)

    def __getitem__(self, index: int) -> Page:
        return self.pages[index]

    def __iter__(self):
        return iter(self.pages)

    @property
    def radius(self) -> int:
        return len(self.pages) // 2

    @property
    def center(self) -> Page:
        return self.pages[self.radius]

    def index_of(self, day: date) -> int | None:
        """Index of the page showing `day` in its current role, if any."""
        for i, page in enumerate(self.pages):
            if page.contains(day, DayRole.CURRENT):
                return i
        return None
