# SPDX-License-Identifier: MIT

import pendulum

from planning.exception import CallerPreconditionError
from planning.model.month_cell import MonthCell


def build_month_grid(
    earliest_start: pendulum.Date, latest_end: pendulum.Date
) -> list[MonthCell]:
    """
    Generate every calendar month touched by the inclusive span.

    Args:
        earliest_start: First day of the project
        latest_end: Last day of the project

    Returns:
        Chronological list of MonthCell, from the month containing
        earliest_start through the month containing latest_end, without gaps

    Raises:
        CallerPreconditionError: earliest_start is after latest_end
    """
    if earliest_start > latest_end:
        raise CallerPreconditionError(
            f"month grid start {earliest_start.isoformat()} "
            f"is after end {latest_end.isoformat()}"
        )

    months: list[MonthCell] = []
    current = earliest_start.start_of("month")

    while current <= latest_end:
        months.append(
            MonthCell(
                year=current.year,
                month_index=current.month - 1,
                day_count=current.days_in_month,
            )
        )
        current = current.add(months=1)

    return months
