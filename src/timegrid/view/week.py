# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from timegrid.duration import format_duration_label
from timegrid.model.entry import Entry
from timegrid.service.calendar import week_label
from timegrid.service.worklog import total_seconds
from timegrid.time import date_to_display_str
from timegrid.view.header import header


def format_entry_cell(entry: Entry) -> str:
    text = f"[bold]{entry['summary']}[/bold] [dim]#{entry['id']}[/dim]\n"
    text += f"{entry['start']}–{entry['end']}"
    logged = total_seconds(entry)
    if logged > 0:
        text += f" [cyan]+{format_duration_label(logged)}[/cyan]"
    return text


def week_report(
    week_view: list[tuple[pendulum.Date, list[Entry]]],
    today: pendulum.Date,
) -> None:
    """Print one column per visible day with that day's entries in start order."""
    header("Weekly Timetable", f"This week · {week_label([d for d, _ in week_view])}")

    table = Table(box=box.SIMPLE, show_lines=True)
    for date, _ in week_view:
        label = date_to_display_str(date)
        if date == today:
            label = f"[bold green]{label}[/bold green]"
        table.add_column(label, vertical="top")

    table.add_row(
        *[
            "\n\n".join(format_entry_cell(entry) for entry in entries)
            for _, entries in week_view
        ]
    )

    console = Console()
    console.print(table)
