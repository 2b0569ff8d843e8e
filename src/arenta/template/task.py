# SPDX-License-Identifier: MIT

from arenta.model.task import Task, TaskStatus


def get_task_template() -> Task:
    return {
        "description": "",
        "planned_start": None,
        "planned_complete": None,
        "actual_start": None,
        "actual_complete": None,
        "status": TaskStatus.BACKLOG,
        "is_deleted": False,
    }
