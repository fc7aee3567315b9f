# SPDX-License-Identifier: MIT

from typing import NamedTuple

import pendulum

from planning.model.month_cell import MonthCell
from planning.model.task import Task


class Timeline(NamedTuple):
    tasks: tuple[Task, ...]
    months: tuple[MonthCell, ...]

    @property
    def start(self) -> pendulum.Date:
        return min(task.span.start for task in self.tasks)

    @property
    def end(self) -> pendulum.Date:
        return max(task.span.end for task in self.tasks)
