"""Scroll-position to page resolution for a horizontally paging window."""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from .days import Window

# How far past the first page the strip may be dragged before it counts
# as crossing the window boundary.
BLANK_OFFSET = 100.0


class PageEventKind(Enum):
    WILL_CHANGE = "will_change"
    DID_CHANGE = "did_change"
    BOUNDARY = "boundary"


@dataclass(frozen=True)
class PageEvent:
    """A paging notification for the host widget."""

    kind: PageEventKind
    index: int
    day: date


def page_index_for_offset(offset_x: float, page_width: float, page_count: int) -> int:
    """Nearest page index for a horizontal offset, clamped to the window."""
    if page_width <= 0:
        raise ValueError(f"Page width must be positive, got {page_width}")
    if page_count <= 0:
        raise ValueError(f"Page count must be positive, got {page_count}")
    # Round half away from zero rather than to even.
    index = math.floor(offset_x / page_width + 0.5)
    return max(0, min(page_count - 1, index))


class PagingTracker:
    """
    Tracks which page of a window is centred while the user drags.

    The tracker is rebuilt together with the window; it never generates
    pages itself. A boundary event tells the host to recentre and request
    a new window.
    """

    def __init__(self, window: Window, page_width: float, blank_offset: float = BLANK_OFFSET):
        if page_width <= 0:
            raise ValueError(f"Page width must be positive, got {page_width}")
        self.window = window
        self.page_width = page_width
        self.blank_offset = blank_offset
        self.start_index = window.radius
        self.current_index = window.radius

    @property
    def page_count(self) -> int:
        return len(self.window)

    @property
    def content_width(self) -> float:
        return self.page_count * self.page_width

    def offset_for(self, index: int) -> float:
        return index * self.page_width

    def index_for(self, offset_x: float) -> int:
        return page_index_for_offset(offset_x, self.page_width, self.page_count)

    def _event(self, kind: PageEventKind, index: int) -> PageEvent:
        return PageEvent(kind=kind, index=index, day=self.window[index].first_current_day)

    def begin_drag(self, offset_x: float) -> None:
        self.start_index = self.index_for(offset_x)
        self.current_index = self.start_index

    def end_drag(self, offset_x: float, velocity_x: float = 0.0) -> float:
        """
        Pick the page the strip should snap to and return its offset.

        A flick that did not leave the starting page still advances one page
        in the direction of the velocity.
        """
        index = self.index_for(offset_x)
        if index == self.start_index:
            if velocity_x > 0 and index + 1 < self.page_count:
                index += 1
            elif velocity_x < 0 and index - 1 >= 0:
                index -= 1
        self.current_index = index
        return self.offset_for(index)

    def settle(self) -> PageEvent | None:
        """Report a page change once scrolling stops, if the page changed."""
        if self.current_index == self.start_index:
            return None
        event = self._event(PageEventKind.DID_CHANGE, self.current_index)
        self.start_index = self.current_index
        return event

    def scroll(self, offset_x: float) -> PageEvent:
        """Classify an intermediate scroll position."""
        if offset_x < -self.blank_offset:
            return self._event(PageEventKind.BOUNDARY, 0)
        if offset_x > self.content_width:
            return self._event(PageEventKind.BOUNDARY, self.page_count - 1)
        return self._event(PageEventKind.WILL_CHANGE, self.index_for(offset_x))
