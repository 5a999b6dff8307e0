"""Ports - interfaces/protocols for external collaborators."""

from .calendar_system import CalendarSystem
from .widget_delegate import CalendarWidgetDelegate

__all__ = [
    "CalendarSystem",
    "CalendarWidgetDelegate",
]
