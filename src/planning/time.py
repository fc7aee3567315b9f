# SPDX-License-Identifier: MIT

import pendulum

from planning.model.locale import Locale


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_from_timestamp_local(timestamp: float) -> pendulum.Date:
    return pendulum.from_timestamp(timestamp, tz="local").date()


def date_to_display_str(date: pendulum.Date, locale: Locale) -> str:
    """Format a date the way planning files write them, e.g. '1 avril 2025'."""
    return f"{date.day} {locale.month_name(date.month)} {date.year}"


def date_to_short_display_str(date: pendulum.Date) -> str:
    return date.format("DD/MM/YYYY")
