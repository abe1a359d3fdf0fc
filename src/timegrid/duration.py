# SPDX-License-Identifier: MIT

import re
from typing import Optional

from timegrid.errors import FormatError

_DURATION_PATTERN = re.compile(r"^(?:([0-9]+)h\s*)?(?:([0-9]+)m)?$")


def parse_duration(text: str) -> int:
    """
    Parse human duration text into seconds.

    Accepted forms are "Xh Xm", "Xh" and "Xm" where X is a non-negative
    integer, e.g. "2h 30m" -> 9000.

    Raises:
        FormatError: if the text is empty or does not match the grammar
    """
    stripped = text.strip()
    match = _DURATION_PATTERN.match(stripped)
    if not stripped or not match:
        raise FormatError(
            f"Invalid time format '{text}'. "
            'Please use "Xh Xm", "Xh", or "Xm" where X is a number.'
        )

    hours, minutes = match.groups()
    seconds = 0
    if hours is not None:
        seconds += int(hours) * 3600
    if minutes is not None:
        seconds += int(minutes) * 60
    return seconds


def parse_duration_optional(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    return parse_duration(text)


def format_timer(seconds: int) -> str:
    minutes, remainder = divmod(seconds, 60)
    return f"{minutes:02d}:{remainder:02d}"


def format_duration_label(seconds: int) -> str:
    hours, remainder = divmod(seconds, 3600)
    minutes, leftover = divmod(remainder, 60)

    if hours == 0 and minutes == 0 and leftover > 0:
        return f"{leftover}s"

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0 or hours == 0:
        parts.append(f"{minutes}m")
    return " ".join(parts)


def format_hours(seconds: float) -> str:
    return f"{seconds / 3600:.2f}"
