# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from timegrid.model.classification import GROUP_KEYS, GroupKey
from timegrid.repository.configuration import CONFIGURATION_REPO
from timegrid.service.calendar import filter_weekend, shift_weeks, week_of
from timegrid.service.worklog import build_timesheet, date_range_defaults
from timegrid.terminal.custom_typer import AliasedTyperGroup
from timegrid.terminal.entry import DATE_HELP
from timegrid.terminal.error import report_errors
from timegrid.terminal.parse import parse_date
from timegrid.time import today_local
from timegrid.view.day import day_report
from timegrid.view.timesheet import timesheet_report
from timegrid.view.week import week_report
from timegrid.workspace import get_entry_repo

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def parse_group_key(value: str) -> GroupKey:
    if value not in GROUP_KEYS:
        raise typer.BadParameter(
            f"'{value}' is not one of {', '.join(GROUP_KEYS)}"
        )
    return value  # type: ignore[return-value]


@app.command("week, w")
@report_errors
def week(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    offset: Annotated[
        int, typer.Option("--offset", "-o", help="weeks before (-) or after (+)")
    ] = 0,
    weekends: Annotated[
        Optional[bool], typer.Option("--weekends/--no-weekends", "-w/-nw")
    ] = None,
) -> None:
    """
    show the Monday-first week containing a date
    """
    today = today_local()
    reference = date if date is not None else today
    if weekends is None:
        weekends = CONFIGURATION_REPO.get_config()["include_weekends"]

    dates = filter_weekend(week_of(shift_weeks(reference, offset)), weekends)
    week_report(get_entry_repo().get_week_view(dates), today)


@app.command("day, d")
@report_errors
def day(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    empty: Annotated[
        bool, typer.Option("--empty", "-e", help="show hours without entries")
    ] = False,
) -> None:
    """
    show one day's entries on the hourly grid
    """
    reference = date if date is not None else today_local()
    increment = CONFIGURATION_REPO.get_config()["slot_increment_minutes"]
    day_report(
        reference,
        get_entry_repo().get_entries_for_day(reference),
        increment,
        show_empty=empty,
    )


@app.command("timesheet, ts")
@report_errors
def timesheet(
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option("--end", "-e", parser=parse_date, help=DATE_HELP),
    ] = None,
    group_by: Annotated[
        Optional[list[str]],
        typer.Option(
            "--group-by",
            "-g",
            help="project, assignee or reporter; accepts multiple options",
        ),
    ] = None,
    weekends: Annotated[
        Optional[bool], typer.Option("--weekends/--no-weekends", "-w/-nw")
    ] = None,
    details: Annotated[
        bool, typer.Option("--details", help="list every worklog under its entry")
    ] = False,
) -> None:
    """
    show logged hours per day and group; defaults to the current month
    """
    default_start, default_end = date_range_defaults(today_local())
    if weekends is None:
        weekends = CONFIGURATION_REPO.get_config()["include_weekends"]
    keys = [parse_group_key(key) for key in group_by or []]

    report = build_timesheet(
        get_entry_repo().get_all_entries(),
        start if start is not None else default_start,
        end if end is not None else default_end,
        keys,
        weekends,
    )
    timesheet_report(report, show_details=details)
