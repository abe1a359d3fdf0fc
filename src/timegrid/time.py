# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum

from timegrid.errors import ValidationError

MINUTES_PER_DAY = 24 * 60

_CLOCK_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def is_calendar_date(value: object) -> bool:
    # pendulum.DateTime subclasses pendulum.Date
    return isinstance(value, pendulum.Date) and not isinstance(value, pendulum.DateTime)


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_to_iso_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_iso_str(date)


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a calendar date."""
    return cast(pendulum.DateTime, pendulum.parse(date_str)).date()


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.Date]:
    if date_str is None:
        return None
    return date_from_str(date_str)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("ddd DD MMM")


def clock_to_minutes(clock: str) -> int:
    """
    Convert an (H)H:MM clock string into minutes after midnight.

    Raises ValidationError if the string is not a clock time within one day.
    """
    match = _CLOCK_PATTERN.match(clock)
    if not match:
        raise ValidationError(f"Time must be in HH:MM format, got '{clock}'")

    hour = int(match.group(1))
    minute = int(match.group(2))
    if hour > 23:
        raise ValidationError(f"Hour must be between 0 and 23, got {hour}")
    if minute > 59:
        raise ValidationError(f"Minute must be between 0 and 59, got {minute}")
    return hour * 60 + minute


def minutes_to_clock(minutes: int) -> str:
    hour, minute = divmod(minutes, 60)
    return f"{hour:02d}:{minute:02d}"


def window_minutes(start: str, end: str) -> int:
    """Length of a start/end window in minutes, wrapping at midnight."""
    return (clock_to_minutes(end) - clock_to_minutes(start)) % MINUTES_PER_DAY
