# SPDX-License-Identifier: MIT

from typing import NamedTuple

import pendulum


class MonthCell(NamedTuple):
    year: int
    month_index: int
    day_count: int

    @property
    def month(self) -> int:
        return self.month_index + 1

    @property
    def first_day(self) -> pendulum.Date:
        return pendulum.date(self.year, self.month, 1)

    @property
    def last_day(self) -> pendulum.Date:
        return pendulum.date(self.year, self.month, self.day_count)
