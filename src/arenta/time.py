# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    pendulum_value = pendulum.instance(python_value, tz="local")
    return pendulum_value.in_tz("UTC")


def python_to_pendulum_utc_optional(
    python_value: Optional[datetime.datetime],
) -> Optional[pendulum.DateTime]:
    if python_value is None:
        return None
    return python_to_pendulum_utc(python_value)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    # Absent timestamps are stored as null or as an empty field
    if datetime is None or datetime == "":
        return None
    return datetime_from_str(datetime)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def local_date(datetime: pendulum.DateTime) -> pendulum.Date:
    """Return the calendar date of a timestamp in the local timezone."""
    return datetime.in_tz("local").date()


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def minutes_between(earlier: pendulum.DateTime, later: pendulum.DateTime) -> int:
    """
    Whole minutes elapsed from earlier to later.

    Raises:
        ValueError: If later precedes earlier. This only happens when a status
            was derived against a different instant than the one used here.
    """
    if later < earlier:
        raise ValueError(
            f"cannot measure duration from {earlier.isoformat()} back to {later.isoformat()}"
        )
    return int((later - earlier).total_seconds() // 60)
