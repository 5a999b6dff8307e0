"""Host-side calendar widget state: reference date, window, selection and paging."""

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import date

from .adapters.cells import DayCell, build_cells, page_title
from .core.days import Granularity, Window, as_day
from .core.grid import GridOptions, generate_window
from .core.paging import PageEvent, PageEventKind, PagingTracker
from .core.selection import SelectionSet
from .core.weekdays import weekday_symbols
from .ports.calendar_system import CalendarSystem
from .ports.widget_delegate import CalendarWidgetDelegate

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 320.0


class CalendarWidget:
    """
    Owns everything mutable about a paging calendar.

    The window is rebuilt from scratch whenever the reference date,
    granularity or radius changes. The selection is kept across rebuilds
    and only changes through select/deselect/tap calls.
    """

    def __init__(
        self,
        calendar: CalendarSystem,
        options: GridOptions = GridOptions(),
        granularity: Granularity = Granularity.MONTH,
        delegate: CalendarWidgetDelegate | None = None,
        current_date: date | None = None,
        width: float = DEFAULT_WIDTH,
        is_selecting_days_active: bool = True,
    ):
        self.calendar = calendar
        self.options = options
        self.granularity = granularity
        self.delegate = delegate
        self.width = width
        self.is_selecting_days_active = is_selecting_days_active
        self.selection = SelectionSet()
        self.current_date = as_day(current_date or calendar.today())
        self.window: Window
        self.tracker: PagingTracker
        self._setup()

    # --- window lifecycle ---

    @property
    def radius(self) -> int:
        return self.options.radius

    @radius.setter
    def radius(self, value: int) -> None:
        # GridOptions validates, so a bad radius never reaches the window
        self.options = replace(self.options, radius=value)
        self._setup()

    @property
    def title(self) -> str:
        return page_title(self.window.center)

    @property
    def center_offset(self) -> float:
        """Scroll offset that shows the reference page."""
        return self.tracker.offset_for(self.window.radius)

    def _setup(self) -> None:
        self.window = generate_window(self.current_date, self.granularity, self.calendar, self.options)
        self.tracker = PagingTracker(self.window, self.width)
        logger.debug(
            f"Built {self.granularity.value} window of {len(self.window)} pages around {self.current_date}"
        )

    def _notify(self, method: str, day: date) -> None:
        if self.delegate is not None:
            getattr(self.delegate, method)(day)

    def change_to(self, day: date) -> None:
        """Recentre the window on `day`."""
        self.current_date = as_day(day)
        self._setup()
        self._notify("did_change_date", self.current_date)

    def change_to_next(self) -> None:
        self.change_to(self.calendar.shift(self.current_date, self.granularity, 1))

    def change_to_previous(self) -> None:
        self.change_to(self.calendar.shift(self.current_date, self.granularity, -1))

    def change_granularity(self, granularity: Granularity) -> None:
        self.granularity = granularity
        self._setup()

    # --- selection ---

    def select(self, day: date) -> None:
        if self.selection.add(day):
            logger.debug(f"Selected {as_day(day)}")

    def select_many(self, days: Iterable[date]) -> None:
        """Replace the selection; every previously selected day is reported as deselected."""
        for dropped in self.selection.replace(days):
            self._notify("did_deselect", dropped)
        logger.debug(f"Selection replaced with {len(self.selection)} days")

    def deselect(self, day: date) -> None:
        if self.selection.discard(day):
            logger.debug(f"Deselected {as_day(day)}")

    def tap(self, day: date) -> None:
        """Handle a tap on a day cell."""
        day = as_day(day)
        if not self.is_selecting_days_active:
            self.select_many([day])
            self._notify("did_select", day)
            return

        if day in self.selection:
            self.deselect(day)
            self._notify("did_deselect", day)
        else:
            self.select(day)
            self._notify("did_select", day)

    # --- presentation ---

    def cells(self, page_index: int | None = None) -> list[DayCell]:
        """View models for a page of the window (the centre page by default)."""
        index = self.window.radius if page_index is None else page_index
        if not 0 <= index < len(self.window):
            raise IndexError(f"Page index {index} outside window of {len(self.window)} pages")
        return build_cells(self.window[index], self.selection, self.calendar.today())

    def weekday_symbols(self, style: str = "very_short") -> list[str]:
        return weekday_symbols(self.calendar.weekday_symbols(style), self.options.week_starts_sunday)

    # --- paging ---

    def begin_drag(self, offset_x: float) -> None:
        self.tracker.begin_drag(offset_x)

    def end_drag(self, offset_x: float, velocity_x: float = 0.0) -> float:
        """Returns the offset the strip should snap to."""
        return self.tracker.end_drag(offset_x, velocity_x)

    def settle(self) -> PageEvent | None:
        """Call when scrolling stops; recentres on the new page if it changed."""
        event = self.tracker.settle()
        if event is not None:
            self.change_to(event.day)
        return event

    def scroll(self, offset_x: float) -> PageEvent:
        event = self.tracker.scroll(offset_x)
        if event.kind is PageEventKind.BOUNDARY:
            logger.debug(f"Scrolled past window boundary, recentring on {event.day}")
            self.change_to(event.day)
        else:
            self._notify("will_change_date", event.day)
        return event
