"""Functional core - pure calendar grid logic with no I/O."""

from .days import CalendarDay, DayRole, Granularity, Page, Window, as_day
from .errors import CalendarRangeError, GridConfigError
from .grid import GridOptions, generate_month_page, generate_week_page, generate_page, generate_window
from .weekdays import weekday_index, leading_count, weekday_symbols
from .selection import NeighborSelection, SelectionSet, neighbor_selection
from .paging import PageEvent, PageEventKind, PagingTracker, page_index_for_offset
from .layout import CellFrame, cell_frames, chunked, item_size

__all__ = [
    # Days
    "CalendarDay",
    "DayRole",
    "Granularity",
    "Page",
    "Window",
    "as_day",
    # Errors
    "CalendarRangeError",
    "GridConfigError",
    # Grid
    "GridOptions",
    "generate_month_page",
    "generate_week_page",
    "generate_page",
    "generate_window",
    # Weekdays
    "weekday_index",
    "leading_count",
    "weekday_symbols",
    # Selection
    "NeighborSelection",
    "SelectionSet",
    "neighbor_selection",
    # Paging
    "PageEvent",
    "PageEventKind",
    "PagingTracker",
    "page_index_for_offset",
    # Layout
    "CellFrame",
    "cell_frames",
    "chunked",
    "item_size",
]
