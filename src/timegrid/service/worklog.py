# SPDX-License-Identifier: MIT

from fractions import Fraction
from typing import Iterable, Optional, Sequence, TypedDict

import pendulum

from timegrid.errors import ValidationError
from timegrid.model.classification import GROUP_KEYS, GroupKey
from timegrid.model.entity_id import EntityId
from timegrid.model.entry import Entry
from timegrid.model.worklog import Worklog
from timegrid.service.calendar import date_range, month_bounds
from timegrid.time import window_minutes

ALL_TASKS_GROUP = "All Tasks"
GROUP_SEPARATOR = " · "


class TimesheetRow(TypedDict):
    entry_id: Optional[EntityId]
    summary: str
    total_hours: float
    daily_seconds: dict[pendulum.Date, Optional[int]]
    worklogs: list[Worklog]


class TimesheetGroup(TypedDict):
    name: str
    total_hours: float
    daily_hours: dict[pendulum.Date, float]
    rows: list[TimesheetRow]


class Timesheet(TypedDict):
    start: pendulum.Date
    end: pendulum.Date
    dates: list[pendulum.Date]
    group_keys: list[GroupKey]
    groups: list[TimesheetGroup]


def total_seconds(entry: Entry) -> int:
    return sum(worklog["duration_seconds"] or 0 for worklog in entry["worklogs"])


def worklog_for_date(entry: Entry, date: pendulum.Date) -> Optional[Worklog]:
    for worklog in entry["worklogs"]:
        if worklog["date"] == date:
            return worklog
    return None


def __validate_keys(keys: Sequence[str]) -> None:
    for key in keys:
        if key not in GROUP_KEYS:
            raise ValidationError(
                f"Unknown group-by key '{key}'. Valid keys: {', '.join(GROUP_KEYS)}"
            )


def group_key(entry: Entry, keys: Sequence[GroupKey]) -> str:
    return GROUP_SEPARATOR.join(entry["classification"][key] for key in keys)


def group_by(
    entries: Iterable[Entry], keys: Sequence[GroupKey]
) -> dict[str, list[Entry]]:
    """
    Partition entries by their classification values.

    Groups appear in the order their first entry was seen and keep entries
    in input order. With no keys every entry lands in "All Tasks".
    """
    __validate_keys(keys)
    entries = list(entries)
    if len(keys) == 0:
        return {ALL_TASKS_GROUP: entries}

    groups: dict[str, list[Entry]] = {}
    for entry in entries:
        groups.setdefault(group_key(entry, keys), []).append(entry)
    return groups


def toggle_group_key(keys: Sequence[GroupKey], key: GroupKey) -> list[GroupKey]:
    __validate_keys([key])
    if key in keys:
        return [existing for existing in keys if existing != key]
    return [*keys, key]


def group_total(entries: Iterable[Entry]) -> float:
    """Hours logged across all entries, unrounded."""
    seconds = sum(total_seconds(entry) for entry in entries)
    return float(Fraction(seconds, 3600))


def daily_seconds(entries: Iterable[Entry], date: pendulum.Date) -> int:
    seconds = 0
    for entry in entries:
        worklog = worklog_for_date(entry, date)
        if worklog is not None:
            seconds += worklog["duration_seconds"] or 0
    return seconds


def daily_total(entries: Iterable[Entry], date: pendulum.Date) -> float:
    return float(Fraction(daily_seconds(entries, date), 3600))


def date_range_defaults(today: pendulum.Date) -> tuple[pendulum.Date, pendulum.Date]:
    return month_bounds(today)


def entry_height_minutes(entry: Entry) -> int:
    """Scheduled minutes plus logged minutes, the length an entry is drawn at."""
    scheduled = window_minutes(entry["start"], entry["end"])
    return scheduled + total_seconds(entry) // 60


def build_timesheet(
    entries: Iterable[Entry],
    start: pendulum.Date,
    end: pendulum.Date,
    keys: Sequence[GroupKey] = (),
    include_weekends: bool = True,
) -> Timesheet:
    """
    Build the timesheet matrix for a date range.

    Each group carries its all-time total hours and its hours per visible
    date; each row carries the entry's all-time total and the seconds of the
    worklog for each visible date (None when nothing was logged).
    """
    dates = date_range(start, end, include_weekends)
    groups: list[TimesheetGroup] = []

    for name, group_entries in group_by(entries, keys).items():
        rows: list[TimesheetRow] = []
        for entry in group_entries:
            row_daily: dict[pendulum.Date, Optional[int]] = {}
            for date in dates:
                worklog = worklog_for_date(entry, date)
                row_daily[date] = (
                    None if worklog is None else worklog["duration_seconds"]
                )
            rows.append(
                {
                    "entry_id": entry["id"],
                    "summary": entry["summary"],
                    "total_hours": group_total([entry]),
                    "daily_seconds": row_daily,
                    "worklogs": sorted(
                        entry["worklogs"], key=lambda worklog: worklog["date"]
                    ),
                }
            )

        groups.append(
            {
                "name": name,
                "total_hours": group_total(group_entries),
                "daily_hours": {
                    date: daily_total(group_entries, date) for date in dates
                },
                "rows": rows,
            }
        )

    return {
        "start": start,
        "end": end,
        "dates": dates,
        "group_keys": list(keys),
        "groups": groups,
    }
