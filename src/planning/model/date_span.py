# SPDX-License-Identifier: MIT

from typing import NamedTuple

import pendulum

from planning.exception import CallerPreconditionError


class DateSpan(NamedTuple):
    start: pendulum.Date
    end: pendulum.Date
    is_single_day: bool

    @classmethod
    def of(cls, start: pendulum.Date, end: pendulum.Date) -> "DateSpan":
        """Build a span from two calendar dates, deriving is_single_day."""
        if start > end:
            raise CallerPreconditionError(
                f"span start {start.isoformat()} is after end {end.isoformat()}"
            )
        return cls(start=start, end=end, is_single_day=start == end)
