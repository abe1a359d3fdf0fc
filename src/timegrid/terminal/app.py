# SPDX-License-Identifier: MIT

import typer

from timegrid.initialize import initialize
from timegrid.terminal import configuration, entry, timer, view, worklog
from timegrid.terminal.custom_typer import OrderedAliasedTyperGroup

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="timegrid - weekly scheduling and time logging in the CLI",
    no_args_is_help=True,
)
app.add_typer(entry.app, name="entry, en")
app.add_typer(worklog.app, name="worklog, wl")
app.add_typer(timer.app, name="timer, ti")
app.add_typer(view.app, name="view, v")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback() -> None:
    """
    timegrid - weekly scheduling and time logging in the CLI
    """
    initialize()


def run() -> None:
    app()
