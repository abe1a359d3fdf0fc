# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from timegrid.duration import format_duration_label
from timegrid.service.worklog import Timesheet
from timegrid.view.header import header


def timesheet_report(timesheet: Timesheet, show_details: bool = False) -> None:
    start = timesheet["start"].format("DD MMM YYYY")
    end = timesheet["end"].format("DD MMM YYYY")
    grouped_by = ", ".join(timesheet["group_keys"]) or "nothing"
    header("Timesheet", f"Current period · {start} – {end} · grouped by {grouped_by}")

    table = Table(box=box.SIMPLE)
    table.add_column("Task / Group")
    table.add_column("Total hours", justify="right")
    for date in timesheet["dates"]:
        table.add_column(f"{date.day}/{date.month}", justify="right")

    for group in timesheet["groups"]:
        table.add_row(
            f"[bold]{group['name']}[/bold]",
            f"[bold]{group['total_hours']:.2f} h[/bold]",
            *[f"{group['daily_hours'][date]:.2f} h" for date in timesheet["dates"]],
        )
        for row in group["rows"]:
            cells = []
            for date in timesheet["dates"]:
                seconds = row["daily_seconds"][date]
                cells.append("" if seconds is None else format_duration_label(seconds))
            table.add_row(
                f"  {row['summary']} [dim]#{row['entry_id']}[/dim]",
                f"{row['total_hours']:.2f} h",
                *cells,
            )
            if show_details:
                for worklog in row["worklogs"]:
                    detail = (
                        f"    [dim]{worklog['date'].to_date_string()} — "
                        f"{format_duration_label(worklog['duration_seconds'] or 0)}"
                    )
                    if worklog["comment"]:
                        detail += f" · {worklog['comment']}"
                    table.add_row(detail + "[/dim]")

    console = Console()
    console.print(table)
