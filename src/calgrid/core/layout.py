"""Cell placement for a horizontally paging 7-column grid."""

from collections.abc import Sequence
from dataclasses import dataclass

from .days import Granularity, Window

COLUMNS = 7


@dataclass(frozen=True)
class CellFrame:
    """Position of one day cell; `page` and `item` index into the window."""

    page: int
    item: int
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height


def chunked(items: Sequence, size: int) -> list[list]:
    """Split a sequence into consecutive chunks of at most `size` items."""
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def item_size(container_width: float, spacing: float = 0.0) -> float:
    """Side of a square day cell so seven cells fill the container."""
    return (container_width - (COLUMNS - 1) * spacing) / COLUMNS


def cell_frames(window: Window, item_width: float) -> tuple[list[CellFrame], tuple[float, float]]:
    """
    Lay out every cell of a window.

    Month pages sit side by side, each a 7-column block of week rows. Week
    pages are a single row running across the whole strip. Returns the
    frames and the (width, height) content size.
    """
    frames = []
    width = height = 0.0
    position = 0
    for page_index, page in enumerate(window):
        for item in range(len(page)):
            if window.granularity is Granularity.MONTH:
                x = (item % COLUMNS) * item_width + page_index * item_width * COLUMNS
                y = (item // COLUMNS) * item_width
            else:
                x = position * item_width
                y = 0.0
            frame = CellFrame(page_index, item, x, y, item_width, item_width)
            width = max(width, frame.max_x)
            height = max(height, frame.max_y)
            frames.append(frame)
            position += 1
    return frames, (width, height)
