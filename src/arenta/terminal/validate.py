# SPDX-License-Identifier: MIT

from typing import Optional

import typer

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_duration(duration: Optional[int]) -> Optional[int]:
    if duration is None:
        return None
    if duration <= 0:
        raise typer.BadParameter("Duration must be a positive number of minutes")
    return duration


def validate_index(index: int) -> int:
    if index < 0:
        raise typer.BadParameter("Index must not be negative")
    return index


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Log level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
        )
    return log_level.upper()
