# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from planning import configuration
from planning.exception import PlanningError
from planning.model.locale import get_locale
from planning.repository.configuration import CONFIGURATION_REPO
from planning.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(config: configuration.Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "plannings_path",
        config["plannings_path"]
        if config["plannings_path"]
        else "None (current directory)",
    )
    table.add_row("locale", config["locale"])
    table.add_row("name_column", config["name_column"])
    table.add_row("status_column", config["status_column"])
    table.add_row("dates_column", config["dates_column"])
    table.add_row("fallback_span_days", str(config["fallback_span_days"]))
    table.add_row("day_width", str(config["day_width"]))
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))
    console.print()
    console.print(f"Configuration file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    plannings_path: Annotated[
        Optional[str],
        typer.Option(
            "--plannings-path",
            help="Directory holding planning CSV files",
        ),
    ] = None,
    remove_plannings_path: Annotated[
        bool,
        typer.Option(
            "--remove-plannings-path",
            help="Reset plannings path to None (use current directory)",
        ),
    ] = False,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", help="Locale of planning dates: fr, en"),
    ] = None,
    name_column: Annotated[
        Optional[str], typer.Option("--name-column", help="CSV column of task names")
    ] = None,
    status_column: Annotated[
        Optional[str],
        typer.Option("--status-column", help="CSV column of task statuses"),
    ] = None,
    dates_column: Annotated[
        Optional[str],
        typer.Option("--dates-column", help="CSV column of task dates"),
    ] = None,
    fallback_span_days: Annotated[
        Optional[int],
        typer.Option(
            "--fallback-span-days",
            min=0,
            help="Length of the placeholder span given to tasks with unreadable dates",
        ),
    ] = None,
    day_width: Annotated[
        Optional[int],
        typer.Option("--day-width", min=1, help="Characters per day in the chart"),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width", min=10, help="Width of the task name column"
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above views",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    console = Console()

    if locale is not None:
        try:
            get_locale(locale)
        except PlanningError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

    if log_level is not None and log_level.upper() not in configuration.LOG_LEVELS:
        console.print(f"[red]Error: Unknown log level '{log_level}'[/red]")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        plannings_path=plannings_path,
        remove_plannings_path=remove_plannings_path,
        locale=locale.lower() if locale is not None else None,
        name_column=name_column,
        status_column=status_column,
        dates_column=dates_column,
        fallback_span_days=fallback_span_days,
        day_width=day_width,
        left_column_width=left_column_width,
        show_header=show_header,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()

    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, title="Updated Configuration"))
