"""Tests for scroll-position resolution and grid layout."""

from datetime import date

import pytest

from calgrid.adapters.gregorian import GregorianCalendar
from calgrid.core.days import Granularity
from calgrid.core.grid import generate_window
from calgrid.core.layout import cell_frames, chunked, item_size
from calgrid.core.paging import PageEventKind, PagingTracker, page_index_for_offset

WIDTH = 320.0


@pytest.fixture
def window():
    # Nov 2023 ... May 2024, centred on Feb 2024
    return generate_window(date(2024, 2, 1), Granularity.MONTH, GregorianCalendar())


@pytest.fixture
def tracker(window):
    return PagingTracker(window, WIDTH)


class TestPageIndexForOffset:
    def test_rounds_to_nearest_page(self):
        assert page_index_for_offset(0, WIDTH, 7) == 0
        assert page_index_for_offset(159, WIDTH, 7) == 0
        assert page_index_for_offset(160, WIDTH, 7) == 1
        assert page_index_for_offset(960, WIDTH, 7) == 3

    def test_clamps_to_window(self):
        assert page_index_for_offset(-500, WIDTH, 7) == 0
        assert page_index_for_offset(5000, WIDTH, 7) == 6

    def test_rejects_bad_geometry(self):
        with pytest.raises(ValueError):
            page_index_for_offset(0, 0, 7)
        with pytest.raises(ValueError):
            page_index_for_offset(0, WIDTH, 0)


class TestPagingTracker:
    def test_starts_on_center(self, tracker):
        assert tracker.start_index == 3
        assert tracker.current_index == 3
        assert tracker.offset_for(3) == 960
        assert tracker.content_width == 7 * WIDTH

    def test_drag_to_next_page(self, tracker):
        tracker.begin_drag(960)
        assert tracker.end_drag(1300) == 1280
        event = tracker.settle()
        assert event.kind is PageEventKind.DID_CHANGE
        assert event.index == 4
        assert event.day == date(2024, 3, 1)
        assert tracker.settle() is None

    def test_short_drag_without_velocity_stays(self, tracker):
        tracker.begin_drag(960)
        assert tracker.end_drag(1000) == 960
        assert tracker.settle() is None

    def test_flick_advances_one_page(self, tracker):
        tracker.begin_drag(960)
        assert tracker.end_drag(1000, velocity_x=2.5) == 1280
        assert tracker.settle().day == date(2024, 3, 1)

    def test_flick_back(self, tracker):
        tracker.begin_drag(960)
        assert tracker.end_drag(940, velocity_x=-1.0) == 640
        assert tracker.settle().day == date(2024, 1, 1)

    def test_flick_does_not_leave_window(self, tracker):
        tracker.begin_drag(1920)
        assert tracker.end_drag(1920, velocity_x=5.0) == 1920
        tracker.begin_drag(0)
        assert tracker.end_drag(0, velocity_x=-5.0) == 0

    def test_scroll_within_window(self, tracker):
        event = tracker.scroll(1300)
        assert event.kind is PageEventKind.WILL_CHANGE
        assert event.day == date(2024, 3, 1)
        assert tracker.scroll(-50).kind is PageEventKind.WILL_CHANGE

    def test_under_scroll_hits_boundary(self, tracker):
        event = tracker.scroll(-150)
        assert event.kind is PageEventKind.BOUNDARY
        assert event.index == 0
        assert event.day == date(2023, 11, 1)

    def test_over_scroll_hits_boundary(self, tracker):
        event = tracker.scroll(7 * WIDTH + 1)
        assert event.kind is PageEventKind.BOUNDARY
        assert event.index == 6
        assert event.day == date(2024, 5, 1)

    def test_rejects_bad_width(self, window):
        with pytest.raises(ValueError):
            PagingTracker(window, 0)


class TestLayout:
    def test_chunked(self):
        assert chunked(list(range(10)), 7) == [list(range(7)), [7, 8, 9]]
        assert chunked([], 7) == []
        with pytest.raises(ValueError):
            chunked([1], 0)

    def test_item_size(self):
        assert item_size(350) == 50
        assert item_size(350, spacing=7) == 44

    def test_month_frames(self):
        # Jan 2024 (35 cells), Feb 2024 (35), Mar 2024 (42)
        window = generate_window(date(2024, 2, 1), Granularity.MONTH, GregorianCalendar(), radius=1)
        frames, size = cell_frames(window, 10)
        assert len(frames) == 35 + 35 + 42
        frame = next(f for f in frames if f.page == 1 and f.item == 8)
        assert (frame.x, frame.y) == (80, 10)
        assert size == (210, 60)

    def test_week_frames(self):
        window = generate_window(date(2024, 2, 1), Granularity.WEEK, GregorianCalendar(), radius=1)
        frames, size = cell_frames(window, 10)
        assert len(frames) == 21
        assert [f.x for f in frames] == [i * 10 for i in range(21)]
        assert size == (210, 10)
