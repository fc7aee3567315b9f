# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from planning.model.planning_file import PlanningFile
from planning.time import date_to_short_display_str
from planning.view.views.header import header


def planning_list_view(planning_files: list[PlanningFile], source: str) -> None:
    header("plannings", source)

    console = Console()

    if len(planning_files) == 0:
        console.print("\n[dim]No planning files found[/dim]\n")
        return

    planning_table = Table(box=box.SIMPLE)
    planning_table.add_column("id")
    planning_table.add_column("name")
    planning_table.add_column("published")

    for planning_file in planning_files:
        planning_table.add_row(
            planning_file.id,
            planning_file.name,
            date_to_short_display_str(planning_file.published),
        )

    console.print(planning_table)
