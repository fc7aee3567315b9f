# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from planning.color import (
    ALTERNATE_MONTH_BACKGROUND,
    DATE_ERROR_COLOR,
    DAY_HEADER_COLOR,
    MAIN_PHASE_STYLE,
    MONTH_HEADER_COLOR,
    STATUS_COLOR,
    get_category_color,
)
from planning.model.locale import FRENCH, Locale
from planning.model.month_cell import MonthCell
from planning.model.task import Task
from planning.model.timeline import Timeline
from planning.service.bar_geometry import get_bar_geometry
from planning.time import date_to_display_str
from planning.view.views.header import header

DATE_ERROR_MARKER = "⚠ "
SPAN_GLYPH = "━"
FALLBACK_SPAN_GLYPH = "╌"
SINGLE_DAY_GLYPH = "●"


def gantt_view(
    title: str,
    timeline: Timeline,
    tasks: Optional[Sequence[Task]] = None,
    published: Optional[str] = None,
    locale: Locale = FRENCH,
    day_width: int = 2,
    left_column_width: int = 40,
) -> None:
    """
    Display a planning timeline as a gantt chart, one column group per month.

    Args:
        title: The planning name
        timeline: The assembled timeline; its month grid is always drawn in full
        tasks: Subset of the timeline tasks to draw (defaults to all of them)
        published: Publication date shown under the title
        locale: Locale used for month names
        day_width: Characters per calendar day
        left_column_width: Width of the left column holding task names
    """
    sub_header = (
        f"{date_to_display_str(timeline.start, locale)} {locale.range_separator} "
        f"{date_to_display_str(timeline.end, locale)}"
    )
    if published:
        sub_header += f" | Date de publication: {published}"
    header(title, sub_header)

    console = Console()

    if tasks is None:
        tasks = timeline.tasks

    if len(tasks) == 0:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    rows = build_gantt_rows(
        timeline.months, tasks, locale, day_width, left_column_width
    )
    console.print(Padding(Group(*rows), (1, 0, 1, 0)), crop=True)

    fallback_count = sum(1 for task in tasks if task.date_error is not None)
    if fallback_count:
        console.print(
            f"[{DATE_ERROR_COLOR}]{DATE_ERROR_MARKER}{fallback_count} task(s) shown "
            f"with a placeholder span because their dates could not be read[/{DATE_ERROR_COLOR}]"
        )
        console.print()


def build_gantt_rows(
    months: Sequence[MonthCell],
    tasks: Sequence[Task],
    locale: Locale = FRENCH,
    day_width: int = 2,
    left_column_width: int = 40,
) -> list[Text]:
    """Build the month header, the day header and one row per task."""
    rows = [
        _build_month_header_row(months, locale, day_width, left_column_width),
        _build_day_header_row(months, day_width, left_column_width),
    ]
    for task in tasks:
        rows.append(_build_task_row(task, months, day_width, left_column_width))
    return rows


def _month_background(month_position: int) -> str:
    return ALTERNATE_MONTH_BACKGROUND if month_position % 2 == 1 else ""


def _fit(text: str, width: int) -> str:
    """Truncate with an ellipsis if too long, otherwise pad to width."""
    if width <= 0:
        return ""
    if len(text) > width:
        if width <= 3:
            return text[:width]
        return text[: width - 3] + "..."
    return text.ljust(width)


def _month_label(month: MonthCell, locale: Locale, width: int) -> str:
    label = f"{locale.month_name(month.month)} {month.year}"
    if len(label) > width:
        label = f"{locale.month_short_name(month.month)} {month.year % 100:02d}"
    if len(label) > width:
        label = label[:width]
    return label.center(width)


def _day_label(day: int, day_width: int) -> str:
    if day_width == 1:
        return str(day % 10)
    return str(day).rjust(day_width)


def _build_month_header_row(
    months: Sequence[MonthCell],
    locale: Locale,
    day_width: int,
    left_column_width: int,
) -> Text:
    row = Text(no_wrap=True, overflow="crop")
    row.append(" " * left_column_width)

    for i, month in enumerate(months):
        width = month.day_count * day_width
        row.append(
            _month_label(month, locale, width),
            style=f"{MONTH_HEADER_COLOR} {_month_background(i)}".strip(),
        )

    return row


def _build_day_header_row(
    months: Sequence[MonthCell],
    day_width: int,
    left_column_width: int,
) -> Text:
    row = Text(no_wrap=True, overflow="crop")
    row.append(" " * left_column_width)

    for i, month in enumerate(months):
        labels = "".join(
            _day_label(day, day_width) for day in range(1, month.day_count + 1)
        )
        row.append(
            labels, style=f"{DAY_HEADER_COLOR} {_month_background(i)}".strip()
        )

    return row


def _format_task_left_column(task: Task, left_column_width: int) -> list[tuple[str, str]]:
    """
    Format the left column of a task row as styled (text, style) parts.

    Main phases are emphasized and tasks drawn with a fallback span are marked.
    """
    name = task.name.strip()
    if task.date_error is not None:
        name = DATE_ERROR_MARKER + name

    if task.date_error is not None:
        name_style = DATE_ERROR_COLOR
    elif task.is_main_phase:
        name_style = MAIN_PHASE_STYLE
    else:
        name_style = ""

    status = f" {task.status_label.strip()}" if task.status_label.strip() else ""
    name_width = left_column_width - len(status)
    if name_width < 4:
        status = ""
        name_width = left_column_width

    parts = [(_fit(name, name_width), name_style)]
    if status:
        parts.append((status, STATUS_COLOR))
    return parts


def _build_task_row(
    task: Task,
    months: Sequence[MonthCell],
    day_width: int,
    left_column_width: int,
) -> Text:
    row = Text(no_wrap=True, overflow="crop")
    for text, style in _format_task_left_column(task, left_column_width):
        row.append(text, style=style)

    color = get_category_color(task.color_category)
    glyph = SPAN_GLYPH if task.date_error is None else FALLBACK_SPAN_GLYPH

    for i, month in enumerate(months):
        cell_width = month.day_count * day_width
        background = _month_background(i)
        geometry = get_bar_geometry(task.span, month, i, months)

        if not geometry.visible:
            row.append(" " * cell_width, style=background)
            continue

        bar_start = geometry.offset * day_width
        if task.span.is_single_day:
            bar_width = max(1, round(geometry.width * day_width))
            bar = SINGLE_DAY_GLYPH * bar_width
        else:
            bar_width = int(geometry.width) * day_width
            bar = glyph * bar_width

        bar_width = min(bar_width, cell_width - bar_start)
        row.append(" " * bar_start, style=background)
        row.append(bar[:bar_width], style=f"{color} {background}".strip())
        row.append(" " * (cell_width - bar_start - bar_width), style=background)

    return row
