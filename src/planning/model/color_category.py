# SPDX-License-Identifier: MIT

from enum import StrEnum


class ColorCategory(StrEnum):
    PREPARATION = "preparation"
    COMMUNICATION = "communication"
    FEEDBACK = "feedback"
    VALIDATION = "validation"
    OTHER = "other"
