# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from arenta.color import DELETED_TASK_COLOR, INDEX_COLOR, color_of_status
from arenta.model.task import Task
from arenta.service.task import status_line
from arenta.time import datetime_to_display_local_datetime_str_optional
from arenta.view.view.views.header import header

TIMESTAMP_COLUMNS = [
    "planned_start",
    "planned_complete",
    "actual_start",
    "actual_complete",
]


def tasks_view(
    report_name: str,
    indexed_tasks: list[tuple[int, Task]],
    now: pendulum.DateTime,
    verbose: bool = False,
) -> None:
    header(report_name)

    console = Console()

    if len(indexed_tasks) == 0:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("index", style=INDEX_COLOR)
    tasks_table.add_column("status")
    tasks_table.add_column("description")
    if verbose:
        for column in TIMESTAMP_COLUMNS:
            tasks_table.add_column(column.replace("_", " "))

    for index, task in indexed_tasks:
        if task["is_deleted"]:
            row = [
                Text(str(index), style=DELETED_TASK_COLOR),
                Text(""),
                Text("(deleted)", style=DELETED_TASK_COLOR),
            ]
            if verbose:
                row += [Text("") for _ in TIMESTAMP_COLUMNS]
            tasks_table.add_row(*row)
            continue

        color = color_of_status(task["status"])
        row = [
            Text(str(index)),
            Text(status_line(task, now), style=color),
            Text(task["description"]),
        ]
        if verbose:
            for column in TIMESTAMP_COLUMNS:
                row.append(
                    Text(
                        datetime_to_display_local_datetime_str_optional(
                            task[column]  # type: ignore[literal-required]
                        )
                        or ""
                    )
                )
        tasks_table.add_row(*row)

    console.print(tasks_table)


def single_task_view(index: int, task: Task, now: pendulum.DateTime) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("index", str(index))
    task_table.add_row("description", Text(task["description"]))
    task_table.add_row(
        "status",
        Text(status_line(task, now), style=color_of_status(task["status"])),
    )
    for column in TIMESTAMP_COLUMNS:
        task_table.add_row(
            column.replace("_", " "),
            datetime_to_display_local_datetime_str_optional(
                task[column]  # type: ignore[literal-required]
            )
            or "",
        )
    if task["is_deleted"]:
        task_table.add_row("deleted", Text("yes", style=DELETED_TASK_COLOR))

    console = Console()
    console.print(task_table)
