# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from timegrid.errors import ValidationError
from timegrid.time import clock_to_minutes, date_from_str, minutes_to_clock, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a calendar date from the command line.

    Valid inputs: YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a day
    offset relative to today such as 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param)

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_clock(clock_param: Optional[str]) -> Optional[str]:
    """Parse an (H)H:mm time and return it zero padded as HH:MM."""
    if clock_param is None:
        return None
    try:
        return minutes_to_clock(clock_to_minutes(clock_param))
    except ValidationError as e:
        raise typer.BadParameter(str(e))


def parse_hour(hour_param: str) -> int:
    """Parse a grid hour given as 9, 09 or 09:00."""
    match = re.match(r"^(\d{1,2})(?::00)?$", hour_param)
    if not match:
        raise typer.BadParameter(f"Hour must look like 9 or 09:00, got '{hour_param}'")
    hour = int(match.group(1))
    if hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    return hour
