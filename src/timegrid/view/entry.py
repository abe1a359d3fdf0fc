# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from timegrid.duration import format_duration_label
from timegrid.model.entry import Entry
from timegrid.service.worklog import total_seconds
from timegrid.time import date_to_iso_str_optional


def single_entry_report(entry: Entry) -> None:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("field", style="cyan")
    table.add_column("value")

    table.add_row("id", str(entry["id"]))
    table.add_row("summary", entry["summary"])
    table.add_row("day", date_to_iso_str_optional(entry["day"]) or "")
    table.add_row("window", f"{entry['start']}–{entry['end']}")
    for key, value in entry["classification"].items():
        if value:
            table.add_row(key, value)
    table.add_row("logged", format_duration_label(total_seconds(entry)))

    console = Console()
    console.print(table)


def worklogs_report(entry: Entry) -> None:
    table = Table(box=box.SIMPLE, title=f"{entry['summary']} #{entry['id']}")
    table.add_column("id")
    table.add_column("date")
    table.add_column("start")
    table.add_column("time spent", justify="right")
    table.add_column("comment")

    for worklog in sorted(entry["worklogs"], key=lambda worklog: worklog["date"]):
        table.add_row(
            str(worklog["id"]),
            worklog["date"].to_date_string(),
            worklog["start"] or "",
            format_duration_label(worklog["duration_seconds"] or 0),
            worklog["comment"] or "",
        )

    console = Console()
    console.print(table)
