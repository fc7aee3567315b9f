# SPDX-License-Identifier: MIT

from typing import Iterable, Optional, Sequence

import pendulum

from planning.exception import (
    CallerPreconditionError,
    DateParseError,
    NoValidTasksError,
)
from planning.logger import get_logger
from planning.model.date_span import DateSpan
from planning.model.locale import FRENCH, Locale
from planning.model.task import RawRecord, Task
from planning.model.timeline import Timeline
from planning.service.classify import DEFAULT_RULES, ClassificationRule, classify_task
from planning.service.date_range import parse_date_range
from planning.service.month_grid import build_month_grid
from planning.time import today_local

logger = get_logger(__name__)

DEFAULT_FALLBACK_SPAN_DAYS = 7


def get_fallback_span(
    today: pendulum.Date, fallback_days: int = DEFAULT_FALLBACK_SPAN_DAYS
) -> DateSpan:
    """Span given to a task whose dates could not be read: today to today + N days."""
    return DateSpan.of(today, today.add(days=fallback_days))


def build_task(
    record: RawRecord,
    locale: Locale,
    rules: Sequence[ClassificationRule],
    fallback_span: DateSpan,
) -> Task:
    name = record.name or ""
    date_expression = record.date_expression or ""

    date_error: Optional[str] = None
    try:
        span = parse_date_range(date_expression, locale)
    except DateParseError as e:
        logger.warning(
            "Could not parse dates %r of task %r, using fallback span: %s",
            date_expression,
            name,
            e,
        )
        span = fallback_span
        date_error = str(e)

    classification = classify_task(name, rules)

    return Task(
        name=name,
        status_label=record.status_label or "",
        raw_date_expression=date_expression,
        span=span,
        is_main_phase=classification.is_main_phase,
        color_category=classification.color_category,
        date_error=date_error,
    )


def assemble_timeline(
    records: Iterable[RawRecord],
    locale: Locale = FRENCH,
    rules: Sequence[ClassificationRule] = DEFAULT_RULES,
    today: Optional[pendulum.Date] = None,
    fallback_days: int = DEFAULT_FALLBACK_SPAN_DAYS,
) -> Timeline:
    """
    Turn raw planning rows into a laid out timeline.

    Rows without a name or a date expression are dropped. Rows whose date
    expression cannot be parsed keep their place with the fallback span and
    carry the parse error in Task.date_error. Tasks are sorted by start date,
    rows sharing a start date keep their input order.

    Args:
        records: Rows in source order
        locale: Month name table and range separator used to read dates
        rules: Ordered color classification rules
        today: Reference day for the fallback span (defaults to the local today)
        fallback_days: Length of the fallback span in days

    Returns:
        Timeline with the sorted tasks and the month grid covering them all

    Raises:
        NoValidTasksError: no row has both a name and a date expression
        CallerPreconditionError: fallback_days is negative
    """
    if fallback_days < 0:
        raise CallerPreconditionError(
            f"fallback span length must not be negative, got {fallback_days}"
        )
    if today is None:
        today = today_local()
    fallback_span = get_fallback_span(today, fallback_days)

    tasks: list[Task] = []
    dropped = 0
    for record in records:
        if not record.name or not record.date_expression:
            dropped += 1
            continue
        tasks.append(build_task(record, locale, rules, fallback_span))

    if dropped:
        logger.debug("Dropped %d rows without a name or dates", dropped)

    if not tasks:
        raise NoValidTasksError("No valid tasks found in the planning")

    tasks.sort(key=lambda task: task.span.start)

    earliest_start = min(task.span.start for task in tasks)
    latest_end = max(task.span.end for task in tasks)
    months = build_month_grid(earliest_start, latest_end)

    logger.debug(
        "Assembled %d tasks over %d months (%s to %s)",
        len(tasks),
        len(months),
        earliest_start.isoformat(),
        latest_end.isoformat(),
    )

    return Timeline(tasks=tuple(tasks), months=tuple(months))
