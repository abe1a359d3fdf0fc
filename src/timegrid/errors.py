# SPDX-License-Identifier: MIT


class TimegridError(Exception):
    """Base class for recoverable errors raised by the scheduling core."""

    pass


class ValidationError(TimegridError):
    """Raised when required entry fields are missing or malformed."""

    pass


class FormatError(TimegridError):
    """Raised when duration text cannot be parsed."""

    pass


class RangeError(TimegridError):
    """Raised when a date range starts after it ends."""

    pass


class NotFoundError(TimegridError):
    """Raised when an operation references an entry that does not exist."""

    pass
