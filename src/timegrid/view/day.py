# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from timegrid.duration import format_duration_label, format_hours
from timegrid.model.entry import Entry
from timegrid.service.calendar import hour_labels, slot_labels
from timegrid.service.worklog import entry_height_minutes, total_seconds
from timegrid.time import date_to_display_str
from timegrid.view.header import header
from timegrid.view.week import format_entry_cell


def day_report(
    date: pendulum.Date,
    entries: list[Entry],
    increment_minutes: int,
    show_empty: bool = False,
) -> None:
    """
    Print the hourly grid for one day, one row per slot.

    Hours without entries are collapsed unless show_empty is set.
    """
    logged = sum(total_seconds(entry) for entry in entries)
    header("Daily Grid", f"{date_to_display_str(date)} · {format_hours(logged)} h logged")

    by_start: dict[str, list[Entry]] = {}
    for entry in entries:
        by_start.setdefault(entry["start"], []).append(entry)

    table = Table(box=box.SIMPLE)
    table.add_column("slot", style="dim")
    table.add_column("entry")
    table.add_column("length", justify="right")

    for hour, label in enumerate(hour_labels()):
        slots = slot_labels(hour, increment_minutes)
        in_hour = [entry for slot in slots for entry in by_start.get(slot, [])]
        # Entries starting off the grid still belong to their hour
        in_hour += [
            entry
            for entry in entries
            if entry["start"][:2] == label[:2]
            and entry["start"] not in slots
        ]
        if len(in_hour) == 0:
            if show_empty:
                table.add_row(label, "", "")
            continue
        for entry in in_hour:
            table.add_row(
                entry["start"],
                format_entry_cell(entry),
                format_duration_label(entry_height_minutes(entry) * 60),
            )

    console = Console()
    console.print(table)
