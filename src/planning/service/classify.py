# SPDX-License-Identifier: MIT

import re
from typing import NamedTuple, Sequence

from planning.model.color_category import ColorCategory
from planning.model.task import Classification

MAIN_PHASE_PATTERN = re.compile(r"^[A-Z0-9\s]+$")


class ClassificationRule(NamedTuple):
    category: ColorCategory
    keywords: tuple[str, ...]


# Evaluated in order, first match wins
DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        ColorCategory.PREPARATION,
        ("préparation", "analyse", "conception", "itérations", "rédaction"),
    ),
    ClassificationRule(
        ColorCategory.COMMUNICATION,
        ("réunion", "atelier", "envoi", "présentation"),
    ),
    ClassificationRule(ColorCategory.FEEDBACK, ("retours",)),
    ClassificationRule(ColorCategory.VALIDATION, ("validation",)),
)


def is_main_phase(name: str) -> bool:
    """A heading ends with a colon or is written in capitals and digits."""
    trimmed = name.strip()
    return trimmed.endswith(":") or MAIN_PHASE_PATTERN.match(trimmed) is not None


def get_color_category(
    name: str, rules: Sequence[ClassificationRule] = DEFAULT_RULES
) -> ColorCategory:
    lowered = name.lower()
    for rule in rules:
        if any(keyword.lower() in lowered for keyword in rule.keywords):
            return rule.category
    return ColorCategory.OTHER


def classify_task(
    name: str, rules: Sequence[ClassificationRule] = DEFAULT_RULES
) -> Classification:
    return Classification(
        is_main_phase=is_main_phase(name),
        color_category=get_color_category(name, rules),
    )
