# SPDX-License-Identifier: MIT

from typing import Iterable

import pendulum

from timegrid.errors import RangeError
from timegrid.time import minutes_to_clock


def day_index(date: pendulum.Date) -> int:
    """Day of week with 0 = Sunday .. 6 = Saturday."""
    return date.isoweekday() % 7


def is_weekend(date: pendulum.Date) -> bool:
    return day_index(date) in (0, 6)


def week_of(reference: pendulum.Date) -> list[pendulum.Date]:
    """
    Return the Monday-first week containing the reference date.

    The window always starts on the Monday at or before the reference, so a
    Sunday belongs to the week that started six days earlier.
    """
    index = day_index(reference)
    offset_to_monday = -6 if index == 0 else 1 - index
    monday = reference.add(days=offset_to_monday)
    return [monday.add(days=offset) for offset in range(7)]


def shift_weeks(date: pendulum.Date, weeks: int) -> pendulum.Date:
    return date.add(days=7 * weeks)


def filter_weekend(
    dates: Iterable[pendulum.Date], include_weekends: bool
) -> list[pendulum.Date]:
    if include_weekends:
        return list(dates)
    return [date for date in dates if not is_weekend(date)]


def date_range(
    start: pendulum.Date, end: pendulum.Date, include_weekends: bool = True
) -> list[pendulum.Date]:
    """
    Every calendar date from start to end inclusive.

    Raises:
        RangeError: if start is after end
    """
    if start > end:
        raise RangeError(
            f"Start date {start.to_date_string()} is after end date "
            f"{end.to_date_string()}"
        )

    dates: list[pendulum.Date] = []
    current = start
    while current <= end:
        dates.append(current)
        current = current.add(days=1)
    return filter_weekend(dates, include_weekends)


def month_bounds(reference: pendulum.Date) -> tuple[pendulum.Date, pendulum.Date]:
    first = reference.start_of("month")
    last = reference.end_of("month")
    return first, last


def week_label(dates: list[pendulum.Date]) -> str:
    if len(dates) == 0:
        return ""
    return f"{dates[0].format('DD MMM')} – {dates[-1].format('DD MMM')}"


def hour_labels() -> list[str]:
    return [minutes_to_clock(hour * 60) for hour in range(24)]


def slot_labels(hour: int, increment_minutes: int = 15) -> list[str]:
    return [
        minutes_to_clock(hour * 60 + minute)
        for minute in range(0, 60, increment_minutes)
    ]
