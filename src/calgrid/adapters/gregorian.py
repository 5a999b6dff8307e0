"""Gregorian calendar system backed by the standard library."""

import calendar
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calgrid.core.days import Granularity
from calgrid.core.errors import CalendarRangeError, GridConfigError

SYMBOL_STYLES = ("full", "short", "very_short")


class GregorianCalendar:
    """
    Proleptic Gregorian calendar.

    Implements CalendarSystem protocol. Monday-first weeks follow ISO 8601
    numbering; Sunday-first weeks number the week containing January 1st
    as week 1.
    """

    def __init__(self, timezone: str | None = None):
        self.timezone = timezone
        try:
            self._tz = ZoneInfo(timezone) if timezone else None
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise GridConfigError(f"Unknown time zone: {timezone!r}") from e

    def __repr__(self) -> str:
        return f"GregorianCalendar(timezone={self.timezone!r})"

    def today(self) -> date:
        """Today's date in the configured time zone (local time if unset)."""
        if self._tz is None:
            return date.today()
        return datetime.now(self._tz).date()

    def weekday(self, day: date) -> int:
        return day.weekday()

    def days_in_month(self, year: int, month: int) -> int:
        return calendar.monthrange(year, month)[1]

    @staticmethod
    def _sunday_week_start(day: date) -> date:
        try:
            return day - timedelta(days=(day.weekday() + 1) % 7)
        except OverflowError as e:
            raise CalendarRangeError(f"No Sunday-first week start for {day}") from e

    def week_of_year(self, day: date, sunday_first: bool = False) -> tuple[int, int]:
        if not sunday_first:
            iso = day.isocalendar()
            return iso[0], iso[1]

        week_start = self._sunday_week_start(day)
        try:
            year = (week_start + timedelta(days=6)).year
        except OverflowError as e:
            raise CalendarRangeError(f"Week of {day} runs past the supported range") from e
        first_week_start = self._sunday_week_start(date(year, 1, 1))
        return year, (week_start - first_week_start).days // 7 + 1

    def start_of_week(self, year: int, week: int, sunday_first: bool = False) -> date:
        try:
            if not sunday_first:
                return date.fromisocalendar(year, week, 1)
            first_week_start = self._sunday_week_start(date(year, 1, 1))
            return first_week_start + timedelta(weeks=week - 1)
        except (ValueError, OverflowError) as e:
            raise CalendarRangeError(f"Cannot find start of week {week} of {year}: {e}") from e

    def shift(self, day: date, granularity: Granularity, count: int) -> date:
        """Shift by months (clamping the day to the target month) or weeks."""
        match granularity:
            case Granularity.MONTH:
                year, month = divmod(day.year * 12 + day.month - 1 + count, 12)
                month += 1
                if not MINYEAR <= year <= MAXYEAR:
                    raise CalendarRangeError(f"Cannot shift {day} by {count} months")
                return date(year, month, min(day.day, self.days_in_month(year, month)))
            case Granularity.WEEK:
                try:
                    return day + timedelta(weeks=count)
                except OverflowError as e:
                    raise CalendarRangeError(f"Cannot shift {day} by {count} weeks") from e
        raise GridConfigError(f"Unknown granularity: {granularity!r}")

    def weekday_symbols(self, style: str = "very_short") -> list[str]:
        """Locale weekday symbols in native order (Sunday first)."""
        match style:
            case "full":
                symbols = list(calendar.day_name)
            case "short":
                symbols = list(calendar.day_abbr)
            case "very_short":
                symbols = [name[:1] for name in calendar.day_abbr]
            case _:
                raise GridConfigError(f"Unknown symbol style: {style!r} (expected one of {SYMBOL_STYLES})")
        # calendar.day_name starts on Monday
        return symbols[6:] + symbols[:6]
