"""Calendar widget delegate interface."""

from datetime import date
from typing import Protocol


class CalendarWidgetDelegate(Protocol):
    """Interface the hosting UI implements to hear about widget changes."""

    def did_change_date(self, day: date) -> None:
        """The widget recentred on a new date."""
        ...

    def will_change_date(self, day: date) -> None:
        """The user is scrolling towards the page anchored at `day`."""
        ...

    def did_select(self, day: date) -> None:
        ...

    def did_deselect(self, day: date) -> None:
        ...
