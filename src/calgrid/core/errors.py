"""Errors raised by the calendar grid core."""


class CalendarRangeError(ValueError):
    """Raised when a calendar cannot represent a requested date."""


class GridConfigError(ValueError):
    """Raised when grid options are invalid (e.g. a non-positive radius)."""
