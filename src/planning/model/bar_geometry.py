# SPDX-License-Identifier: MIT

from typing import NamedTuple

# Width of a single-day marker in day-units, narrower than one day column.
SINGLE_DAY_WIDTH: float = 2 / 3


class BarGeometry(NamedTuple):
    visible: bool
    offset: int
    width: float


HIDDEN_BAR = BarGeometry(visible=False, offset=0, width=0)
