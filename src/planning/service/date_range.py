# SPDX-License-Identifier: MIT

import pendulum

from planning.exception import MalformedDateError, MalformedRangeError
from planning.model.date_span import DateSpan
from planning.model.locale import FRENCH, Locale


def _is_plain_integer(value: str) -> bool:
    # int() also takes signs, underscores and non-ASCII digits
    return value.isascii() and value.isdigit()


def parse_date(token: str, locale: Locale = FRENCH) -> pendulum.Date:
    """
    Parse a single date token such as "1 avril 2025".

    The token must hold exactly three space separated parts: the day number,
    the month name from the locale table (case-insensitive) and the year.

    Raises:
        MalformedDateError: wrong part count, unknown month name, non-integer
            day or year, or a day that does not exist in that month
    """
    parts = token.split(" ")
    if len(parts) != 3:
        raise MalformedDateError(f"Invalid date format: {token!r}", token)

    day_str, month_str, year_str = parts

    month_name = month_str.lower()
    if month_name not in locale.months:
        raise MalformedDateError(f"Invalid month: {month_str!r}", token)
    month = locale.months.index(month_name) + 1

    if not (_is_plain_integer(day_str) and _is_plain_integer(year_str)):
        raise MalformedDateError(f"Invalid day or year in date: {token!r}", token)
    day = int(day_str)
    year = int(year_str)

    try:
        return pendulum.date(year, month, day)
    except ValueError as e:
        raise MalformedDateError(f"Invalid calendar date {token!r}: {e}", token) from e


def parse_date_range(expression: str, locale: Locale = FRENCH) -> DateSpan:
    """
    Parse a single date or a "<date> → <date>" range into a DateSpan.

    Raises:
        MalformedRangeError: the separator splits the expression into anything
            other than two parts
        MalformedDateError: one of the dates is invalid
    """
    if locale.range_separator not in expression:
        date = parse_date(expression.strip(), locale)
        return DateSpan.of(date, date)

    parts = expression.split(locale.range_separator)
    if len(parts) != 2:
        raise MalformedRangeError(
            f"Invalid date range format: {expression!r}", expression
        )

    start = parse_date(parts[0].strip(), locale)
    end = parse_date(parts[1].strip(), locale)
    if start > end:
        raise MalformedRangeError(
            f"Date range ends before it starts: {expression!r}", expression
        )

    return DateSpan.of(start, end)
