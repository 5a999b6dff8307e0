"""Calendar grid generation - pure functions, no I/O."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

from .days import CalendarDay, DayRole, Granularity, Page, Window, as_day
from .errors import CalendarRangeError, GridConfigError
from .weekdays import leading_count

if TYPE_CHECKING:
    from calgrid.ports.calendar_system import CalendarSystem

DAYS_PER_WEEK = 7
DEFAULT_RADIUS = 3


@dataclass(frozen=True)
class GridOptions:
    """Immutable calendar configuration threaded into every generator call."""

    week_starts_sunday: bool = False
    radius: int = DEFAULT_RADIUS

    def __post_init__(self):
        _check_radius(self.radius)


def _check_radius(radius: int) -> None:
    if isinstance(radius, bool) or not isinstance(radius, int):
        raise GridConfigError(f"Window radius must be an integer, got {radius!r}")
    if radius <= 0:
        raise GridConfigError(f"Window radius must be positive, got {radius}")


def _month_dates(anchor: date, days: range) -> list[date]:
    return [date(anchor.year, anchor.month, n) for n in days]


def generate_month_page(
    day: date,
    calendar: "CalendarSystem",
    options: GridOptions = GridOptions(),
) -> Page:
    """
    Build the month page containing `day`.

    The page starts with the tail of the previous month up to the first
    of the month and is always followed by 1-7 days of the next month, so a
    month that already ends on a week boundary still gets a full extra week.
    """
    first = as_day(day).replace(day=1)
    previous_month = calendar.shift(first, Granularity.MONTH, -1)
    next_month = calendar.shift(first, Granularity.MONTH, 1)

    leading = leading_count(calendar.weekday(first), options.week_starts_sunday)
    previous_len = calendar.days_in_month(previous_month.year, previous_month.month)
    current_len = calendar.days_in_month(first.year, first.month)
    trailing = DAYS_PER_WEEK - (leading + current_len) % DAYS_PER_WEEK

    previous = _month_dates(previous_month, range(previous_len - leading + 1, previous_len + 1))
    current = _month_dates(first, range(1, current_len + 1))
    following = _month_dates(next_month, range(1, trailing + 1))

    days = (
        [CalendarDay(d, DayRole.PREVIOUS_PERIOD) for d in previous]
        + [CalendarDay(d, DayRole.CURRENT) for d in current]
        + [CalendarDay(d, DayRole.NEXT_PERIOD) for d in following]
    )
    return Page(granularity=Granularity.MONTH, days=tuple(days))


def generate_week_page(
    day: date,
    calendar: "CalendarSystem",
    options: GridOptions = GridOptions(),
) -> Page:
    """
    Build the week page containing `day`.

    Days are bucketed against the month of `day`: earlier months are
    previous-period, later months next-period.
    """
    day = as_day(day)
    sunday_first = options.week_starts_sunday
    year, week = calendar.week_of_year(day, sunday_first)
    start = calendar.start_of_week(year, week, sunday_first)
    try:
        dates = [start + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]
    except OverflowError as e:
        raise CalendarRangeError(f"Week starting {start} runs past the supported range") from e

    month = (day.year, day.month)
    days = []
    for d in dates:
        if (d.year, d.month) < month:
            role = DayRole.PREVIOUS_PERIOD
        elif (d.year, d.month) > month:
            role = DayRole.NEXT_PERIOD
        else:
            role = DayRole.CURRENT
        days.append(CalendarDay(d, role))
    return Page(granularity=Granularity.WEEK, days=tuple(days))


def generate_page(
    day: date,
    granularity: Granularity,
    calendar: "CalendarSystem",
    options: GridOptions = GridOptions(),
) -> Page:
    """Build the page of the given granularity containing `day`."""
    match granularity:
        case Granularity.MONTH:
            return generate_month_page(day, calendar, options)
        case Granularity.WEEK:
            return generate_week_page(day, calendar, options)
    raise GridConfigError(f"Unknown granularity: {granularity!r}")


def generate_window(
    day: date,
    granularity: Granularity,
    calendar: "CalendarSystem",
    options: GridOptions = GridOptions(),
    radius: int | None = None,
) -> Window:
    """
    Build `2 * radius + 1` consecutive pages centred on the page of `day`.

    `radius` defaults to the one in `options`.
    """
    day = as_day(day)
    radius = options.radius if radius is None else radius
    _check_radius(radius)

    pages = []
    for offset in range(1, radius + 1):
        earlier = calendar.shift(day, granularity, -offset)
        later = calendar.shift(day, granularity, offset)
        pages.insert(0, generate_page(earlier, granularity, calendar, options))
        pages.append(generate_page(later, granularity, calendar, options))
    pages.insert(radius, generate_page(day, granularity, calendar, options))

    return Window(reference=day, granularity=granularity, pages=tuple(pages))
