"""Calendar system interface."""

from datetime import date
from typing import Protocol

from calgrid.core.days import Granularity


class CalendarSystem(Protocol):
    """Interface for the date arithmetic the grid generator relies on."""

    def today(self) -> date:
        """Today's date in the calendar's time zone."""
        ...

    def weekday(self, day: date) -> int:
        """Weekday of a date, Monday=0 ... Sunday=6."""
        ...

    def days_in_month(self, year: int, month: int) -> int:
        """Number of days in the given month."""
        ...

    def week_of_year(self, day: date, sunday_first: bool = False) -> tuple[int, int]:
        """(year_for_week_of_year, week_of_year) of the week containing `day`."""
        ...

    def start_of_week(self, year: int, week: int, sunday_first: bool = False) -> date:
        """First day of the given week of the given week-numbering year."""
        ...

    def shift(self, day: date, granularity: Granularity, count: int) -> date:
        """Shift a date by `count` months or weeks.

        Raises CalendarRangeError if the result cannot be represented.
        """
        ...

    def weekday_symbols(self, style: str = "very_short") -> list[str]:
        """Weekday symbols in native order, starting on Sunday."""
        ...
