# SPDX-License-Identifier: MIT

from typing import NamedTuple

from planning.exception import PlanningError

RANGE_SEPARATOR = "→"


class Locale(NamedTuple):
    code: str
    months: tuple[str, ...]
    months_short: tuple[str, ...]
    range_separator: str = RANGE_SEPARATOR

    def month_name(self, month: int) -> str:
        """Full month name for a 1-based month number."""
        return self.months[month - 1]

    def month_short_name(self, month: int) -> str:
        return self.months_short[month - 1]


FRENCH = Locale(
    code="fr",
    months=(
        "janvier",
        "février",
        "mars",
        "avril",
        "mai",
        "juin",
        "juillet",
        "août",
        "septembre",
        "octobre",
        "novembre",
        "décembre",
    ),
    months_short=(
        "janv.",
        "févr.",
        "mars",
        "avr.",
        "mai",
        "juin",
        "juil.",
        "août",
        "sept.",
        "oct.",
        "nov.",
        "déc.",
    ),
)

ENGLISH = Locale(
    code="en",
    months=(
        "january",
        "february",
        "march",
        "april",
        "may",
        "june",
        "july",
        "august",
        "september",
        "october",
        "november",
        "december",
    ),
    months_short=(
        "jan",
        "feb",
        "mar",
        "apr",
        "may",
        "jun",
        "jul",
        "aug",
        "sep",
        "oct",
        "nov",
        "dec",
    ),
)

LOCALES: dict[str, Locale] = {locale.code: locale for locale in (FRENCH, ENGLISH)}


def get_locale(code: str) -> Locale:
    try:
        return LOCALES[code.lower()]
    except KeyError:
        raise PlanningError(
            f"Unknown locale '{code}', expected one of: {', '.join(sorted(LOCALES))}"
        ) from None
