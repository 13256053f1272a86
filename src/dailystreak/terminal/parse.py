# SPDX-License-Identifier: MIT

import re
from typing import Optional, Union

import pendulum
import typer

from dailystreak.exceptions import ValidationError
from dailystreak.time import day_from_str, to_day


def parse_day(day_param: Optional[str], today: pendulum.Date) -> pendulum.Date:
    """
    Resolve a day argument relative to `today`.

    Accepts YYYY-MM-DD, today/t, yesterday/y or a signed day offset such as -1.
    """
    if day_param is None:
        return today

    day = day_param.strip().lower()

    if day == "today" or day == "t":
        return today
    if day == "yesterday" or day == "y":
        return today.subtract(days=1)

    # Match numeric input for relative days (e.g., "-1", "-7")
    if re.match(r"^[-+]?\d+$", day):
        try:
            return to_day(today.add(days=int(day)))
        except (OverflowError, ValueError, ValidationError) as e:
            raise typer.BadParameter(f"Invalid day offset '{day_param}': {e}")

    if re.match(r"^\d{4}-\d{2}-\d{2}$", day):
        try:
            return to_day(day_from_str(day))
        except (ValueError, ValidationError) as e:
            raise typer.BadParameter(f"Invalid date '{day_param}': {e}")

    raise typer.BadParameter(
        "Incorrect date format, use YYYY-MM-DD, today, yesterday or -N"
    )


def parse_value(value_param: Optional[str]) -> Optional[Union[int, float]]:
    if value_param is None:
        return None
    if re.match(r"^-?\d+$", value_param):
        return int(value_param)
    try:
        return float(value_param)
    except ValueError:
        raise typer.BadParameter(f"Value must be a number, got '{value_param}'")
