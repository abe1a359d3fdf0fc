# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich import print

from timegrid.model.classification import Classification
from timegrid.model.entry import EntryFields
from timegrid.terminal.custom_typer import AliasedTyperGroup
from timegrid.terminal.error import report_errors
from timegrid.terminal.parse import parse_clock, parse_date, parse_hour
from timegrid.time import today_local
from timegrid.view.entry import single_entry_report
from timegrid.workspace import get_entry_repo

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def __classification(
    assignee: Optional[str], reporter: Optional[str], project: Optional[str]
) -> Classification:
    return {
        "assignee": assignee or "",
        "reporter": reporter or "",
        "project": project or "",
    }


@app.command("add, a", no_args_is_help=True)
@report_errors
def add(
    summary: str,
    start: Annotated[
        str,
        typer.Option("--start", "-s", parser=parse_clock, help="HH:MM"),
    ],
    end: Annotated[
        str,
        typer.Option("--end", "-e", parser=parse_clock, help="HH:MM"),
    ],
    day: Annotated[
        Optional[pendulum.Date],
        typer.Option("--day", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    assignee: Annotated[Optional[str], typer.Option("--assignee", "-a")] = None,
    reporter: Annotated[Optional[str], typer.Option("--reporter", "-r")] = None,
    project: Annotated[Optional[str], typer.Option("--project", "-p")] = None,
) -> None:
    """
    add an entry to the grid
    """
    fields: EntryFields = {
        "summary": summary,
        "start": start,
        "end": end,
        "day": day if day is not None else today_local(),
        "classification": __classification(assignee, reporter, project),
    }
    entry = get_entry_repo().add(fields)
    single_entry_report(entry)


@app.command("place, p", no_args_is_help=True)
@report_errors
def place(
    day: Annotated[pendulum.Date, typer.Argument(parser=parse_date, help=DATE_HELP)],
    time: Annotated[str, typer.Argument(parser=parse_clock, help="slot time HH:MM")],
    summary: str,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_clock, help="override the default end"),
    ] = None,
    assignee: Annotated[Optional[str], typer.Option("--assignee", "-a")] = None,
    reporter: Annotated[Optional[str], typer.Option("--reporter", "-r")] = None,
    project: Annotated[Optional[str], typer.Option("--project", "-p")] = None,
) -> None:
    """
    add an entry at a free grid slot with the default length
    """
    repository = get_entry_repo()
    draft = repository.place_from_slot_click(day, time)
    if draft is None:
        print(f"[red]Slot {time} on {day.to_date_string()} is already occupied[/red]")
        raise typer.Exit(code=1)

    entry = repository.add(
        {
            "summary": summary,
            "start": draft["start"],
            "end": end if end is not None else draft["end"],
            "day": draft["day"],
            "classification": __classification(assignee, reporter, project),
        }
    )
    single_entry_report(entry)


@app.command("edit, e", no_args_is_help=True)
@report_errors
def edit(
    id: int,
    summary: Annotated[Optional[str], typer.Option("--summary", "-m")] = None,
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_clock, help="HH:MM"),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_clock, help="HH:MM"),
    ] = None,
    day: Annotated[
        Optional[pendulum.Date],
        typer.Option("--day", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    assignee: Annotated[Optional[str], typer.Option("--assignee", "-a")] = None,
    reporter: Annotated[Optional[str], typer.Option("--reporter", "-r")] = None,
    project: Annotated[Optional[str], typer.Option("--project", "-p")] = None,
) -> None:
    """
    edit an entry; options left out keep their current value
    """
    repository = get_entry_repo()
    current = repository.get_entry(id)
    classification = current["classification"]

    entry = repository.edit(
        id,
        {
            "summary": summary if summary is not None else current["summary"],
            "start": start if start is not None else current["start"],
            "end": end if end is not None else current["end"],
            "day": day if day is not None else current["day"],
            "classification": {
                "assignee": assignee
                if assignee is not None
                else classification["assignee"],
                "reporter": reporter
                if reporter is not None
                else classification["reporter"],
                "project": project if project is not None else classification["project"],
            },
        },
    )
    single_entry_report(entry)


@app.command("move, mv", no_args_is_help=True)
@report_errors
def move(
    id: int,
    day: Annotated[pendulum.Date, typer.Argument(parser=parse_date, help=DATE_HELP)],
    hour: Annotated[int, typer.Argument(parser=parse_hour, help="grid hour, e.g. 9")],
) -> None:
    """
    move an entry to the top of another grid hour, keeping its length
    """
    entry = get_entry_repo().move(id, day, hour)
    single_entry_report(entry)


@app.command("remove, rm", no_args_is_help=True)
def remove(id: int) -> None:
    """
    delete an entry together with its worklogs
    """
    get_entry_repo().remove(id)
    print(f"[green]Removed entry {id}[/green]")
