"""Adapters - concrete implementations of ports and presentation mapping."""

from .gregorian import GregorianCalendar
from .cells import DayCell, build_cells, page_title

__all__ = [
    "GregorianCalendar",
    "DayCell",
    "build_cells",
    "page_title",
]
