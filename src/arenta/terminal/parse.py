# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from arenta.query.filter_type import ComparisonOperator
from arenta.time import datetime_from_str_utc

FILTER_PATTERN = re.compile(r"^(<=|>=|<|>|=)?\s*(\S+)$")


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime: {e}")

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        # Validate hour and minute ranges
        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        # Create datetime with today's date in local timezone, then convert to UTC
        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        pendulum_date_time = pendulum_date_time.in_tz("UTC")
        return pendulum_date_time

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        pendulum_date_time = pendulum.today("local").add(days=days_offset)
        pendulum_date_time = pendulum_date_time.in_tz("UTC")
        return pendulum_date_time

    if datetime == "now" or datetime == "n":
        pendulum_date_time = pendulum.now()
        pendulum_date_time = pendulum_date_time.in_tz("UTC")
        return pendulum_date_time
    if datetime == "today" or datetime == "t":
        pendulum_date_time = pendulum.today("local")
        pendulum_date_time = pendulum_date_time.in_tz("UTC")
        return pendulum_date_time
    if datetime == "yesterday" or datetime == "y":
        pendulum_date_time = pendulum.yesterday("local")
        pendulum_date_time = pendulum_date_time.in_tz("UTC")
        return pendulum_date_time
    if datetime == "tomorrow" or datetime == "o":
        pendulum_date_time = pendulum.tomorrow("local")
        pendulum_date_time = pendulum_date_time.in_tz("UTC")
        return pendulum_date_time
    raise typer.BadParameter("Incorrect datetime format")


def parse_date(date_param: Optional[str], today: pendulum.Date) -> Optional[pendulum.Date]:
    """
    Parse a calendar date relative to today.

    Args:
        date_param: YYYY-MM-DD, today, yesterday, tomorrow, or a day offset like 1, -1
        today: The local date that relative inputs are resolved against

    Returns:
        The parsed date, or None if date_param is None

    Raises:
        typer.BadParameter: If the input is not a recognized date
    """
    if date_param is None:
        return None

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date_param):
        try:
            return pendulum.Date.fromisoformat(date_param)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")
    if re.match(r"^[+-]?\d+$", date_param):
        return today.add(days=int(date_param))
    if date_param == "today" or date_param == "t":
        return today
    if date_param == "yesterday" or date_param == "y":
        return today.subtract(days=1)
    if date_param == "tomorrow" or date_param == "o":
        return today.add(days=1)
    raise typer.BadParameter(f"Incorrect date format: '{date_param}'")


def parse_date_filter(
    expression: str, today: pendulum.Date
) -> tuple[ComparisonOperator, pendulum.Date]:
    """
    Parse a date filter expression into an operator and a reference date.

    The expression is an optional operator (<, <=, =, >, >=; default =)
    followed by a date accepted by parse_date. A bare non-negative number n
    selects the recent n days, i.e. ">= today - n".

    Raises:
        typer.BadParameter: If the expression cannot be parsed
    """
    expression = expression.strip()

    if re.match(r"^\d+$", expression):
        return ComparisonOperator.GE, today.subtract(days=int(expression))

    filter_match = FILTER_PATTERN.match(expression)
    if not filter_match:
        raise typer.BadParameter(f"Incorrect date filter: '{expression}'")

    operator = ComparisonOperator(filter_match.group(1) or "=")
    reference_date = parse_date(filter_match.group(2), today)
    if reference_date is None:
        raise typer.BadParameter(f"Incorrect date filter: '{expression}'")
    return operator, reference_date
