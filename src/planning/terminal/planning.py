# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from planning import configuration
from planning.exception import (
    NoValidTasksError,
    PlanningError,
    PlanningNotFoundError,
    PlanningSourceError,
)
from planning.model.locale import Locale, get_locale
from planning.repository.configuration import CONFIGURATION_REPO
from planning.repository.planning import PlanningRepository
from planning.service.search import filter_tasks
from planning.service.timeline import assemble_timeline
from planning.terminal.parse import parse_locale
from planning.time import date_to_short_display_str
from planning.view.views.gantt import gantt_view
from planning.view.views.planning_list import planning_list_view


def list_plannings(
    path: Annotated[
        Optional[Path],
        typer.Option(
            "--path",
            "-p",
            help="Directory holding planning CSV files (defaults to the configured plannings_path)",
        ),
    ] = None,
) -> None:
    """List the planning files available, newest first."""
    config = CONFIGURATION_REPO.get_config()
    base_path = path if path is not None else configuration.get_plannings_path(config)

    repository = PlanningRepository(base_path)
    planning_list_view(repository.list_planning_files(), str(base_path))


def show(
    planning: Annotated[
        str, typer.Argument(help="Planning id, file name or path to a CSV file")
    ],
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-q", help="Only show tasks whose name contains this text"),
    ] = None,
    locale: Annotated[
        Optional[Locale],
        typer.Option(
            "--locale",
            "-lo",
            parser=parse_locale,
            help="Locale of the dates in the file: fr, en",
        ),
    ] = None,
    path: Annotated[
        Optional[Path],
        typer.Option("--path", "-p", help="Directory holding planning CSV files"),
    ] = None,
    day_width: Annotated[
        Optional[int],
        typer.Option("--day-width", "-dw", min=1, help="Characters per day"),
    ] = None,
) -> None:
    """Render a planning file as a gantt chart."""
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    if locale is None:
        try:
            locale = get_locale(config["locale"])
        except PlanningError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

    base_path = path if path is not None else configuration.get_plannings_path(config)
    repository = PlanningRepository(base_path)

    try:
        planning_file = repository.get_planning_file(planning)
    except PlanningNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    try:
        records = list(
            repository.read_records(
                planning_file,
                name_column=config["name_column"],
                status_column=config["status_column"],
                dates_column=config["dates_column"],
            )
        )
        timeline = assemble_timeline(
            records,
            locale=locale,
            fallback_days=config["fallback_span_days"],
        )
    except PlanningSourceError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except NoValidTasksError:
        console.print(
            f"[red]No valid tasks found in planning '{planning_file.name}'[/red]"
        )
        raise typer.Exit(1)
    except PlanningError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    gantt_view(
        planning_file.name,
        timeline,
        tasks=filter_tasks(timeline.tasks, search),
        published=date_to_short_display_str(planning_file.published),
        locale=locale,
        day_width=day_width if day_width is not None else config["day_width"],
        left_column_width=config["left_column_width"],
    )
