# SPDX-License-Identifier: MIT

import typer
from rich import print
from rich.live import Live
from rich.panel import Panel

from timegrid.duration import format_duration_label, format_timer
from timegrid.model.timer import TimerSession
from timegrid.service.timer import SessionTimer, SleepTicker
from timegrid.terminal.custom_typer import AliasedTyperGroup
from timegrid.terminal.error import report_errors
from timegrid.workspace import get_entry_repo

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def render_timer(summary: str, timer: SessionTimer) -> Panel:
    status = "Session running" if timer.is_running else "Timer idle"
    return Panel(
        f"[bold]{format_timer(timer.elapsed_seconds)}[/bold]\n[dim]{status}[/dim]",
        title=f"Time Tracking · {summary}",
        expand=False,
    )


@app.command("run, r", no_args_is_help=True)
@report_errors
def run(entry_id: int) -> None:
    """
    track time on an entry until Ctrl-C, then log it for today
    """
    repository = get_entry_repo()
    entry = repository.get_entry(entry_id)

    def save_session(session: TimerSession) -> None:
        repository.add_worklog_seconds(
            session["task_id"], session["date"], session["seconds"]
        )

    with Live(auto_refresh=False) as live:
        ticker = SleepTicker(
            on_tick=lambda: live.update(
                render_timer(entry["summary"], timer), refresh=True
            )
        )
        with SessionTimer(ticker, sink=save_session) as timer:
            timer.start(entry_id)
            live.update(render_timer(entry["summary"], timer), refresh=True)
            ticker.run()
            session = timer.stop()

    if session is None:
        print("[yellow]Nothing tracked[/yellow]")
        return
    print(
        f"[green]Logged {format_duration_label(session['seconds'])} on "
        f"{session['date'].to_date_string()} for {entry['summary']}[/green]"
    )
