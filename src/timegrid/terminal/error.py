# SPDX-License-Identifier: MIT

from functools import wraps
from typing import Any, Callable, TypeVar

import typer
from rich.console import Console

from timegrid.errors import TimegridError

F = TypeVar("F", bound=Callable[..., Any])

error_console = Console(stderr=True)


def report_errors(func: F) -> F:
    """Print core errors as a single red line and exit with status 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except TimegridError as e:
            error_console.print(f"[red]{type(e).__name__}:[/red] {e}")
            raise typer.Exit(code=1)

    return wrapper  # type: ignore[return-value]
