# SPDX-License-Identifier: MIT

from functools import cmp_to_key
from typing import TypeVar

from arenta.model.task import Task
from arenta.service.task import compare_priority

T = TypeVar("T")


def sort_tasks_by_priority(tasks: list[Task]) -> list[Task]:
    # sorted() is stable, so ties keep their collection order
    return sorted(tasks, key=cmp_to_key(compare_priority))


def sort_indexed_tasks_by_priority(
    indexed_tasks: list[tuple[T, Task]],
) -> list[tuple[T, Task]]:
    return sorted(
        indexed_tasks,
        key=cmp_to_key(lambda lhs, rhs: compare_priority(lhs[1], rhs[1])),
    )
