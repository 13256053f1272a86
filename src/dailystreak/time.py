# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum

from dailystreak.exceptions import ValidationError

MIN_DAY = pendulum.date(1970, 1, 1)
MAX_DAY = pendulum.date(2100, 12, 31)


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def to_day(value: object) -> pendulum.Date:
    """
    Normalize a calendar day to a pendulum.Date.

    Accepts pendulum.Date and datetime.date. Anything carrying a time of day,
    or falling outside MIN_DAY..MAX_DAY, is rejected.
    """
    if isinstance(value, datetime.datetime) or not isinstance(value, datetime.date):
        raise ValidationError(f"Expected a calendar date, got {value!r}")
    day = pendulum.date(value.year, value.month, value.day)
    if day < MIN_DAY or day > MAX_DAY:
        raise ValidationError(
            f"Day {day.to_date_string()} is outside "
            f"{MIN_DAY.to_date_string()}..{MAX_DAY.to_date_string()}"
        )
    return day


def day_range(end: pendulum.Date, days: int) -> list[pendulum.Date]:
    """The `days` calendar days ending at `end` inclusive, oldest first."""
    return [end.subtract(days=offset) for offset in range(days - 1, -1, -1)]


def day_to_str(day: datetime.date) -> str:
    return day.isoformat()


def day_to_str_optional(day: Optional[pendulum.Date]) -> Optional[str]:
    if day is None:
        return None
    return day_to_str(day)


def day_from_str(day: str) -> pendulum.Date:
    parsed = datetime.date.fromisoformat(day)
    return pendulum.date(parsed.year, parsed.month, parsed.day)


def day_from_str_optional(day: Optional[str]) -> Optional[pendulum.Date]:
    if day is None:
        return None
    return day_from_str(day)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))

