# SPDX-License-Identifier: MIT

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from dailystreak.exceptions import DailyStreakError


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn domain and store errors into a message and exit code 1."""
    try:
        yield
    except DailyStreakError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
