# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from planning.terminal import configuration
from planning.terminal.custom_typer import OrderedTyperGroup
from planning.terminal.legend import legend
from planning.terminal.planning import list_plannings, show
from planning.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="Planning - Gantt charts of CSV plannings in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="list, l")(list_plannings)
app.command(name="show, s", no_args_is_help=True)(show)
app.command(name="legend, lg")(legend)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    Planning - Gantt charts of CSV plannings in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
