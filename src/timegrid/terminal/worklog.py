# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich import print

from timegrid.duration import format_duration_label, parse_duration
from timegrid.template.worklog import get_worklog_template
from timegrid.terminal.custom_typer import AliasedTyperGroup
from timegrid.terminal.entry import DATE_HELP
from timegrid.terminal.error import report_errors
from timegrid.terminal.parse import parse_clock, parse_date
from timegrid.time import today_local
from timegrid.view.entry import worklogs_report
from timegrid.workspace import get_entry_repo

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("log, l", no_args_is_help=True)
@report_errors
def log(
    entry_id: int,
    time_spent: Annotated[
        str, typer.Argument(help='e.g. "2h 30m", "1h", "45m"')
    ],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_clock, help="HH:MM"),
    ] = None,
    comment: Annotated[Optional[str], typer.Option("--comment", "-c")] = None,
) -> None:
    """
    log time against an entry; replaces any worklog already saved for the date
    """
    worklog = get_worklog_template(date if date is not None else today_local())
    worklog["start"] = start
    worklog["duration_seconds"] = parse_duration(time_spent)
    worklog["comment"] = comment

    entry = get_entry_repo().append_or_replace_worklog(entry_id, worklog)
    print(
        f"[green]Logged {format_duration_label(worklog['duration_seconds'])} "
        f"on {worklog['date'].to_date_string()} for {entry['summary']}[/green]"
    )


@app.command("show, s", no_args_is_help=True)
@report_errors
def show(entry_id: int) -> None:
    """
    list the worklogs of an entry
    """
    worklogs_report(get_entry_repo().get_entry(entry_id))
