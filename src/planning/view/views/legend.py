# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from planning.color import CATEGORY_COLORS, CATEGORY_LABELS
from planning.view.views.header import header


def legend_view() -> None:
    header("Légende des couleurs")

    legend_table = Table(box=box.SIMPLE)
    legend_table.add_column("color")
    legend_table.add_column("category")
    legend_table.add_column("keywords")

    for category, color in CATEGORY_COLORS.items():
        legend_table.add_row(
            f"[{color}]■■[/{color}]",
            str(category),
            CATEGORY_LABELS[category],
        )

    console = Console()
    console.print(legend_table)
