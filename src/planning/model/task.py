# SPDX-License-Identifier: MIT

from typing import NamedTuple, Optional

from planning.model.color_category import ColorCategory
from planning.model.date_span import DateSpan


class RawRecord(NamedTuple):
    name: Optional[str]
    status_label: Optional[str]
    date_expression: Optional[str]


class Classification(NamedTuple):
    is_main_phase: bool
    color_category: ColorCategory


class Task(NamedTuple):
    name: str
    status_label: str
    raw_date_expression: str
    span: DateSpan
    is_main_phase: bool
    color_category: ColorCategory
    # Set when raw_date_expression could not be parsed and span is the fallback
    date_error: Optional[str] = None
