# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from arenta.model.task import Task, TaskStatus
from arenta.template.task import get_task_template
from arenta.time import minutes_between


class TaskValidationError(Exception):
    """Raised when a task's timestamps violate the schedule invariants."""

    pass


def validate_task(task: Task) -> bool:
    """
    Check the timestamp invariants of a task.

    - planned_start and planned_complete are either both set or both unset
    - planned_start <= planned_complete
    - actual_start <= actual_complete when both are set

    Returns True if valid, raises TaskValidationError if not.
    """
    planned_start = task["planned_start"]
    planned_complete = task["planned_complete"]
    if (planned_start is None) != (planned_complete is None):
        raise TaskValidationError(
            "planned start and planned complete must be set together"
        )
    if (
        planned_start is not None
        and planned_complete is not None
        and planned_start > planned_complete
    ):
        raise TaskValidationError("planned start is later than planned complete")

    actual_start = task["actual_start"]
    actual_complete = task["actual_complete"]
    if (
        actual_start is not None
        and actual_complete is not None
        and actual_start > actual_complete
    ):
        raise TaskValidationError("actual start is later than actual complete")

    return True


def new_immediate_task(description: str, now: pendulum.DateTime) -> Task:
    task = get_task_template()
    task["description"] = description
    task["actual_start"] = now
    task["status"] = TaskStatus.ONGOING
    return task


def new_planned_task(
    description: str,
    planned_start: pendulum.DateTime,
    planned_complete: pendulum.DateTime,
    now: pendulum.DateTime,
) -> Task:
    task = get_task_template()
    task["description"] = description
    task["planned_start"] = planned_start
    task["planned_complete"] = planned_complete
    validate_task(task)
    task["status"] = (
        TaskStatus.OVERDUE if planned_start < now else TaskStatus.PLANNED
    )
    return task


def new_backlog_task(description: str) -> Task:
    task = get_task_template()
    task["description"] = description
    return task


def derive_status(task: Task, now: pendulum.DateTime) -> TaskStatus:
    """
    Derive the status of a task from its timestamps alone.

    Earlier rules win, so a task completed in the past is complete even if its
    planned start has long passed.
    """
    if task["actual_complete"] is not None and task["actual_complete"] < now:
        return TaskStatus.COMPLETE
    if task["actual_start"] is not None and task["actual_start"] < now:
        return TaskStatus.ONGOING
    if task["planned_start"] is not None:
        if task["planned_start"] < now:
            return TaskStatus.OVERDUE
        return TaskStatus.PLANNED
    return TaskStatus.BACKLOG


def update_status(task: Task, now: pendulum.DateTime) -> None:
    task["status"] = derive_status(task, now)


def start_task(task: Task, now: pendulum.DateTime) -> None:
    task["actual_start"] = now
    task["status"] = TaskStatus.ONGOING


def complete_task(task: Task, now: pendulum.DateTime) -> None:
    task["actual_complete"] = now
    task["status"] = TaskStatus.COMPLETE


def _earlier(
    lhs: Optional[pendulum.DateTime], rhs: Optional[pendulum.DateTime]
) -> bool:
    # An unset timestamp is later than any set one
    if lhs is None:
        return False
    if rhs is None:
        return True
    return lhs < rhs


def _later(lhs: Optional[pendulum.DateTime], rhs: Optional[pendulum.DateTime]) -> bool:
    # An unset timestamp is earlier than any set one
    if lhs is None:
        return False
    if rhs is None:
        return True
    return lhs > rhs


def has_higher_priority_than(task: Task, other: Task) -> bool:
    """
    Decide whether task ranks above other in the task list.

    Status classes rank overdue > ongoing > planned > complete > backlog.
    Within a class, overdue and planned tasks rank by earliest planned start,
    ongoing tasks by latest actual start, complete tasks by latest actual
    complete. Both directions may be False for ties.
    """
    match task["status"]:
        case TaskStatus.OVERDUE:
            if other["status"] != TaskStatus.OVERDUE:
                return True
            return _earlier(task["planned_start"], other["planned_start"])
        case TaskStatus.ONGOING:
            if other["status"] == TaskStatus.OVERDUE:
                return False
            if other["status"] != TaskStatus.ONGOING:
                return True
            return _later(task["actual_start"], other["actual_start"])
        case TaskStatus.PLANNED:
            if other["status"] in (TaskStatus.COMPLETE, TaskStatus.BACKLOG):
                return True
            if other["status"] != TaskStatus.PLANNED:
                return False
            return _earlier(task["planned_start"], other["planned_start"])
        case TaskStatus.COMPLETE:
            if other["status"] == TaskStatus.BACKLOG:
                return True
            if other["status"] != TaskStatus.COMPLETE:
                return False
            return _later(task["actual_complete"], other["actual_complete"])
        case TaskStatus.BACKLOG:
            return False


def compare_priority(task: Task, other: Task) -> int:
    """Comparator for sorting, highest priority first. Ties compare equal."""
    if has_higher_priority_than(task, other):
        return -1
    if has_higher_priority_than(other, task):
        return 1
    return 0


def status_line(task: Task, now: pendulum.DateTime) -> str:
    """Describe a task's status relative to now, e.g. "ongoing for 5 minutes"."""
    match task["status"]:
        case TaskStatus.PLANNED:
            minutes = minutes_between(now, _require(task["planned_start"]))
            return f"planned to start in {_format_minutes(minutes)}"
        case TaskStatus.OVERDUE:
            minutes = minutes_between(_require(task["planned_start"]), now)
            return f"{_format_minutes(minutes)} overdue"
        case TaskStatus.ONGOING:
            minutes = minutes_between(_require(task["actual_start"]), now)
            return f"ongoing for {_format_minutes(minutes)}"
        case TaskStatus.COMPLETE:
            minutes = minutes_between(_require(task["actual_complete"]), now)
            return f"complete {_format_minutes(minutes)} ago"
        case TaskStatus.BACKLOG:
            return "in backlog"


def _require(datetime: Optional[pendulum.DateTime]) -> pendulum.DateTime:
    if datetime is None:
        raise ValueError("status is stale, call update_status first")
    return datetime


def _format_minutes(minutes: int) -> str:
    if minutes == 1:
        return "1 minute"
    return f"{minutes} minutes"
