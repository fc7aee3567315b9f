# SPDX-License-Identifier: MIT

from typing import Sequence

from planning.model.bar_geometry import HIDDEN_BAR, SINGLE_DAY_WIDTH, BarGeometry
from planning.model.date_span import DateSpan
from planning.model.month_cell import MonthCell


def get_bar_geometry(
    span: DateSpan,
    month: MonthCell,
    month_index: int,
    all_months: Sequence[MonthCell],
) -> BarGeometry:
    """
    Compute the horizontal segment a task occupies inside one month column.

    Offsets and widths are expressed in day-units, one unit per calendar day,
    except single-day tasks which get the fixed SINGLE_DAY_WIDTH marker.

    Width cases, first match wins:
    1. single-day task: marker width, offset at its day
    2. task covers the whole month: full month, offset 0
    3. task started before the month: up to its end day, offset 0
    4. task ends after the month: from its start day to the month end
    5. task contained in the month: from its start day to its end day

    Args:
        span: The task's date span
        month: The month column being laid out
        month_index: Position of month in all_months
        all_months: The full month grid (the computation only needs month)

    Returns:
        BarGeometry, with visible=False when the task does not touch the month
    """
    month_start = month.first_day
    month_end = month.last_day

    if not (span.start <= month_end and span.end >= month_start):
        return HIDDEN_BAR

    offset = 0
    if span.start > month_start:
        offset = span.start.day - 1

    if span.is_single_day:
        return BarGeometry(visible=True, offset=offset, width=SINGLE_DAY_WIDTH)

    if span.start <= month_start and span.end >= month_end:
        return BarGeometry(visible=True, offset=0, width=month.day_count)

    if span.start <= month_start:
        return BarGeometry(visible=True, offset=0, width=span.end.day)

    if span.end >= month_end:
        return BarGeometry(
            visible=True, offset=offset, width=month.day_count - span.start.day + 1
        )

    return BarGeometry(
        visible=True, offset=offset, width=span.end.day - span.start.day + 1
    )
