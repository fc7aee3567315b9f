# SPDX-License-Identifier: MIT

from planning.model.color_category import ColorCategory

CATEGORY_COLORS: dict[ColorCategory, str] = {
    ColorCategory.PREPARATION: "#FFD700",
    ColorCategory.COMMUNICATION: "#3b82f6",
    ColorCategory.FEEDBACK: "#4ade80",
    ColorCategory.VALIDATION: "#ef4444",
    ColorCategory.OTHER: "#8b5cf6",
}

CATEGORY_LABELS: dict[ColorCategory, str] = {
    ColorCategory.PREPARATION: "Préparation, Analyse, Conception, Itérations, Rédaction",
    ColorCategory.COMMUNICATION: "Réunion, Atelier, Envoi, Présentation",
    ColorCategory.FEEDBACK: "Retours",
    ColorCategory.VALIDATION: "Validation",
    ColorCategory.OTHER: "Autres tâches",
}

# Color constants for chart chrome
MONTH_HEADER_COLOR = "bold yellow"
DAY_HEADER_COLOR = "grey62"
MAIN_PHASE_STYLE = "bold underline"
STATUS_COLOR = "cyan"
DATE_ERROR_COLOR = "bright_red"
ALTERNATE_MONTH_BACKGROUND = "on grey15"


def get_category_color(category: ColorCategory) -> str:
    return CATEGORY_COLORS[category]
