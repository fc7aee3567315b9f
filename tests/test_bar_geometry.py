"""Tests for placing task bars inside month columns."""

import pendulum
import pytest

from planning.model.bar_geometry import SINGLE_DAY_WIDTH, BarGeometry
from planning.model.date_span import DateSpan
from planning.model.month_cell import MonthCell
from planning.service.bar_geometry import get_bar_geometry
from planning.service.date_range import parse_date_range
from planning.service.month_grid import build_month_grid

APRIL_2025 = MonthCell(year=2025, month_index=3, day_count=30)


def span(start: tuple[int, int, int], end: tuple[int, int, int]) -> DateSpan:
    return DateSpan.of(pendulum.date(*start), pendulum.date(*end))


def position(task_span: DateSpan, month: MonthCell = APRIL_2025) -> BarGeometry:
    return get_bar_geometry(task_span, month, 0, [month])


class TestVisibility:
    @pytest.mark.parametrize(
        "task_span",
        [
            span((2025, 5, 1), (2025, 5, 10)),
            span((2025, 3, 1), (2025, 3, 31)),
            span((2025, 3, 31), (2025, 3, 31)),
            span((2024, 4, 1), (2024, 4, 30)),
        ],
    )
    def test_task_outside_month_is_hidden(self, task_span: DateSpan) -> None:
        assert position(task_span) == BarGeometry(visible=False, offset=0, width=0)

    def test_task_touching_last_day_is_visible(self) -> None:
        assert position(span((2025, 4, 30), (2025, 5, 3))).visible is True

    def test_task_touching_first_day_is_visible(self) -> None:
        assert position(span((2025, 3, 20), (2025, 4, 1))).visible is True


class TestWidth:
    def test_exact_month(self) -> None:
        geometry = position(span((2025, 4, 1), (2025, 4, 30)))
        assert geometry == BarGeometry(visible=True, offset=0, width=30)

    def test_spanning_past_both_ends(self) -> None:
        geometry = position(span((2025, 3, 15), (2025, 5, 10)))
        assert geometry == BarGeometry(visible=True, offset=0, width=30)

    def test_started_before_month(self) -> None:
        geometry = position(span((2025, 3, 20), (2025, 4, 10)))
        assert geometry == BarGeometry(visible=True, offset=0, width=10)

    def test_ends_after_month(self) -> None:
        geometry = position(span((2025, 4, 25), (2025, 5, 5)))
        assert geometry == BarGeometry(visible=True, offset=24, width=6)

    def test_contained_in_month(self) -> None:
        geometry = position(span((2025, 4, 10), (2025, 4, 12)))
        assert geometry == BarGeometry(visible=True, offset=9, width=3)

    def test_contained_from_first_day(self) -> None:
        geometry = position(span((2025, 4, 1), (2025, 4, 3)))
        assert geometry == BarGeometry(visible=True, offset=0, width=3)

    def test_two_day_task_on_month_boundary(self) -> None:
        task_span = span((2025, 4, 30), (2025, 5, 1))
        may = MonthCell(year=2025, month_index=4, day_count=31)

        assert position(task_span) == BarGeometry(visible=True, offset=29, width=1)
        assert position(task_span, may) == BarGeometry(visible=True, offset=0, width=1)


class TestSingleDay:
    @pytest.mark.parametrize("day", [1, 2, 15, 29, 30])
    def test_single_day_marker_width(self, day: int) -> None:
        geometry = position(span((2025, 4, day), (2025, 4, day)))

        assert geometry.visible is True
        assert geometry.width == SINGLE_DAY_WIDTH
        assert geometry.offset == day - 1

    def test_single_day_width_is_off_the_day_grid(self) -> None:
        assert 0 < SINGLE_DAY_WIDTH < 1


def test_leap_year_task_across_february() -> None:
    task_span = parse_date_range("28 février 2024 → 2 mars 2024")
    months = build_month_grid(task_span.start, task_span.end)
    february, march = months

    assert february.day_count == 29
    assert get_bar_geometry(task_span, february, 0, months) == BarGeometry(
        visible=True, offset=27, width=2
    )
    assert get_bar_geometry(task_span, march, 1, months) == BarGeometry(
        visible=True, offset=0, width=2
    )


def test_result_does_not_depend_on_grid_context() -> None:
    task_span = span((2025, 4, 10), (2025, 6, 2))
    months = build_month_grid(pendulum.date(2025, 1, 1), pendulum.date(2025, 12, 31))

    assert get_bar_geometry(task_span, APRIL_2025, 3, months) == get_bar_geometry(
        task_span, APRIL_2025, 0, [APRIL_2025]
    )
