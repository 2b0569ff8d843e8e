# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum


class TaskStatus(StrEnum):
    BACKLOG = "backlog"
    PLANNED = "planned"
    OVERDUE = "overdue"
    ONGOING = "ongoing"
    COMPLETE = "complete"


class Task(TypedDict):
    description: str
    planned_start: Optional[pendulum.DateTime]
    planned_complete: Optional[pendulum.DateTime]
    actual_start: Optional[pendulum.DateTime]
    actual_complete: Optional[pendulum.DateTime]
    status: TaskStatus
    is_deleted: bool
