"""Tests for selection state, neighbour highlighting and day cells."""

from datetime import date, datetime

import pytest

from calgrid.adapters.cells import build_cells, page_title
from calgrid.adapters.gregorian import GregorianCalendar
from calgrid.core.days import DayRole
from calgrid.core.grid import generate_month_page, generate_week_page
from calgrid.core.selection import NeighborSelection, SelectionSet, neighbor_selection


@pytest.fixture
def day():
    return date(2024, 2, 15)


class TestSelectionSet:
    def test_duplicates_collapse(self, day):
        selection = SelectionSet([day, day, datetime(2024, 2, 15, 12, 30)])
        assert len(selection) == 1
        assert list(selection) == [day]

    def test_add_and_discard(self, day):
        selection = SelectionSet()
        assert selection.add(day) is True
        assert selection.add(day) is False
        assert day in selection
        assert selection.discard(day) is True
        assert selection.discard(day) is False
        assert day not in selection

    def test_contains_normalizes_datetime(self, day):
        selection = SelectionSet([day])
        assert datetime(2024, 2, 15, 8, 0) in selection
        assert "2024-02-15" not in selection

    def test_replace_returns_dropped_days(self, day):
        other = date(2024, 2, 20)
        selection = SelectionSet([day])
        assert selection.replace([other, other]) == [day]
        assert list(selection) == [other]

    def test_clear(self, day):
        selection = SelectionSet([day])
        assert selection.clear() == [day]
        assert len(selection) == 0


class TestNeighborSelection:
    def test_day_before_selection(self, day):
        assert neighbor_selection(date(2024, 2, 14), [day]) is NeighborSelection.NEXT

    def test_day_after_selection(self, day):
        assert neighbor_selection(date(2024, 2, 16), [day]) is NeighborSelection.PREVIOUS

    def test_between_two_selected_days(self):
        selected = [date(2024, 2, 14), date(2024, 2, 16)]
        assert neighbor_selection(date(2024, 2, 15), selected) is NeighborSelection.BOTH

    def test_isolated_day(self, day):
        assert neighbor_selection(day, [day]) is NeighborSelection.NONE
        assert neighbor_selection(date(2024, 2, 17), [day]) is NeighborSelection.NONE
        assert neighbor_selection(day, []) is NeighborSelection.NONE

    def test_across_month_boundary(self):
        assert neighbor_selection(date(2024, 2, 29), [date(2024, 3, 1)]) is NeighborSelection.NEXT

    def test_range_limits(self):
        assert neighbor_selection(date.min, [date.max]) is NeighborSelection.NONE
        assert neighbor_selection(date.max, [date.min]) is NeighborSelection.NONE


class TestBuildCells:
    @pytest.fixture
    def page(self):
        return generate_month_page(date(2024, 2, 1), GregorianCalendar())

    def test_one_cell_per_day(self, page):
        cells = build_cells(page, [])
        assert [c.day for c in cells] == page.dates
        assert cells[0].role is DayRole.PREVIOUS_PERIOD
        assert cells[0].day_number == "29"
        assert cells[-1].role is DayRole.NEXT_PERIOD

    def test_selection_band(self, page):
        selection = SelectionSet([date(2024, 2, 10), date(2024, 2, 11)])
        cells = {c.day: c for c in build_cells(page, selection, today=date(2024, 2, 14))}

        assert cells[date(2024, 2, 10)].is_selected
        assert cells[date(2024, 2, 10)].neighbor_selection is NeighborSelection.NEXT
        assert cells[date(2024, 2, 11)].neighbor_selection is NeighborSelection.PREVIOUS
        assert not cells[date(2024, 2, 9)].is_selected
        assert cells[date(2024, 2, 9)].neighbor_selection is NeighborSelection.NEXT
        assert cells[date(2024, 2, 12)].neighbor_selection is NeighborSelection.PREVIOUS
        assert cells[date(2024, 2, 13)].neighbor_selection is NeighborSelection.NONE

    def test_today_flag(self, page):
        cells = build_cells(page, [], today=date(2024, 2, 14))
        assert [c.day for c in cells if c.is_current_day] == [date(2024, 2, 14)]

    def test_to_dict(self, page):
        cell = build_cells(page, [date(2024, 1, 30)])[0]
        assert cell.to_dict() == {
            "date": "2024-01-29",
            "role": "previous",
            "selected": False,
            "today": False,
            "neighbor_selection": "next",
        }


class TestPageTitle:
    def test_month_page(self):
        page = generate_month_page(date(2024, 2, 1), GregorianCalendar())
        assert page_title(page) == "February 2024"

    def test_week_page_uses_first_current_day(self):
        page = generate_week_page(date(2024, 3, 1), GregorianCalendar())
        assert page_title(page) == "March 2024"
