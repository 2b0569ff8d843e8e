# SPDX-License-Identifier: MIT

import pendulum

from arenta.model.filter import TaskFilter
from arenta.model.task import Task, TaskStatus
from arenta.query.filter_type import ComparisonOperator
from arenta.time import local_date


def compare_dates(
    operator: ComparisonOperator, date: pendulum.Date, reference_date: pendulum.Date
) -> bool:
    match operator:
        case ComparisonOperator.LT:
            return date < reference_date
        case ComparisonOperator.LE:
            return date <= reference_date
        case ComparisonOperator.EQ:
            return date == reference_date
        case ComparisonOperator.GT:
            return date > reference_date
        case ComparisonOperator.GE:
            return date >= reference_date


def satisfy(task: Task, filter: TaskFilter) -> bool:
    """
    Check whether a task should appear in a rendering pass.

    Backlog tasks are included only on request. Any other task is included
    when the local date of at least one of its timestamps compares true
    against the filter's reference date.
    """
    if task["status"] == TaskStatus.BACKLOG and filter["include_backlog"]:
        return True

    timestamps = [
        task["planned_start"],
        task["planned_complete"],
        task["actual_start"],
        task["actual_complete"],
    ]
    return any(
        compare_dates(filter["operator"], local_date(timestamp), filter["reference_date"])
        for timestamp in timestamps
        if timestamp is not None
    )


def filter_tasks(tasks: list[Task], filter: TaskFilter) -> list[tuple[int, Task]]:
    """Return the tasks satisfying the filter paired with their collection index."""
    return [(index, task) for index, task in enumerate(tasks) if satisfy(task, filter)]
