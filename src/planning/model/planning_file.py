# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NamedTuple

import pendulum


class PlanningFile(NamedTuple):
    id: str
    name: str
    path: Path
    published: pendulum.Date
