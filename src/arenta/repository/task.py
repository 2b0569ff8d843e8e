# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from arenta import configuration, time
from arenta.model.task import Task, TaskStatus
from arenta.query.sort import sort_tasks_by_priority
from arenta.service.task import (
    complete_task,
    start_task,
    update_status,
    validate_task,
)

logger = logging.getLogger(__name__)


class TaskIndexError(IndexError):
    """Raised when a command refers to a task index that does not exist."""

    def __init__(self, index: int) -> None:
        super().__init__("index out of range")
        self.index = index


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        if not configuration.DATA_TASKS_PATH.is_file():
            self._tasks = []
            return
        data = load(configuration.DATA_TASKS_PATH.read_text(), Loader=Loader)
        if data is None or data.get("tasks") is None:
            self._tasks = []
            return
        # A record failing validation leaves the repository unloaded
        self._tasks = [
            self.__convert_task_for_deserialization(raw_task)
            for raw_task in data["tasks"]
        ]
        logger.debug(
            "loaded %d tasks from %s", len(self._tasks), configuration.DATA_TASKS_PATH
        )

    def __save_data(self) -> None:
        serializable_tasks = [
            self.__convert_task_for_serialization(deepcopy(task)) for task in self.tasks
        ]
        configuration.DATA_TASKS_PATH.write_text(
            dump({"tasks": serializable_tasks}, Dumper=Dumper, sort_keys=False)
        )
        logger.debug(
            "saved %d tasks to %s",
            len(serializable_tasks),
            configuration.DATA_TASKS_PATH,
        )

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        # Status is derived, never stored
        return {
            "description": task["description"],
            "planned_start": time.datetime_to_iso_str_optional(task["planned_start"]),
            "planned_complete": time.datetime_to_iso_str_optional(
                task["planned_complete"]
            ),
            "actual_start": time.datetime_to_iso_str_optional(task["actual_start"]),
            "actual_complete": time.datetime_to_iso_str_optional(
                task["actual_complete"]
            ),
            "is_deleted": task["is_deleted"],
        }

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task: Task = {
            "description": str(task.get("description") or ""),
            "planned_start": time.datetime_from_str_optional(task.get("planned_start")),
            "planned_complete": time.datetime_from_str_optional(
                task.get("planned_complete")
            ),
            "actual_start": time.datetime_from_str_optional(task.get("actual_start")),
            "actual_complete": time.datetime_from_str_optional(
                task.get("actual_complete")
            ),
            "status": TaskStatus.BACKLOG,
            "is_deleted": bool(task.get("is_deleted", False)),
        }
        validate_task(deserializable_task)
        return deserializable_task

    def __get_task_ref(self, index: int) -> Task:
        if index < 0 or index >= len(self.tasks):
            raise TaskIndexError(index)
        return self.tasks[index]

    def save_new_task(self, task: Task) -> int:
        validate_task(task)
        self.is_dirty = True
        self.tasks.append(task)
        return len(self.tasks) - 1

    def update_statuses(self, now: pendulum.DateTime) -> None:
        for task in self.tasks:
            update_status(task, now)

    def start_task(self, index: int, now: pendulum.DateTime) -> None:
        """
        Start a task at now.

        Raises:
            TaskIndexError: If no task has the given index
            TaskValidationError: If the task already completed before now
        """
        task = deepcopy(self.__get_task_ref(index))
        start_task(task, now)
        validate_task(task)

        self.is_dirty = True
        self.tasks[index] = task

    def complete_task(self, index: int, now: pendulum.DateTime) -> None:
        """
        Complete a task at now.

        Raises:
            TaskIndexError: If no task has the given index
            TaskValidationError: If the task is recorded as starting after now
        """
        task = deepcopy(self.__get_task_ref(index))
        complete_task(task, now)
        validate_task(task)

        self.is_dirty = True
        self.tasks[index] = task

    def modify_task(
        self,
        index: int,
        now: pendulum.DateTime,
        description: Optional[str] = None,
        planned_start: Optional[pendulum.DateTime] = None,
        planned_complete: Optional[pendulum.DateTime] = None,
        actual_start: Optional[pendulum.DateTime] = None,
        actual_complete: Optional[pendulum.DateTime] = None,
        remove_planned_start: bool = False,
        remove_planned_complete: bool = False,
        remove_actual_start: bool = False,
        remove_actual_complete: bool = False,
    ) -> None:
        """
        Edit a task in place.

        The edit is applied to a copy and validated first, so a rejected edit
        leaves the stored task untouched.

        Raises:
            TaskIndexError: If no task has the given index
            TaskValidationError: If the edited timestamps are inconsistent
        """
        task = deepcopy(self.__get_task_ref(index))

        if description is not None:
            task["description"] = description
        if planned_start is not None:
            task["planned_start"] = planned_start
        if planned_complete is not None:
            task["planned_complete"] = planned_complete
        if actual_start is not None:
            task["actual_start"] = actual_start
        if actual_complete is not None:
            task["actual_complete"] = actual_complete

        if remove_planned_start:
            task["planned_start"] = None
        if remove_planned_complete:
            task["planned_complete"] = None
        if remove_actual_start:
            task["actual_start"] = None
        if remove_actual_complete:
            task["actual_complete"] = None

        validate_task(task)
        update_status(task, now)

        self.is_dirty = True
        self.tasks[index] = task

    def delete_task(self, index: int) -> None:
        task = self.__get_task_ref(index)
        self.is_dirty = True
        task["is_deleted"] = True

    def purge_deleted_tasks(self) -> int:
        remaining = [task for task in self.tasks if not task["is_deleted"]]
        purged = len(self.tasks) - len(remaining)
        if purged > 0:
            self.is_dirty = True
            self._tasks = remaining
        return purged

    def sort_tasks(self, now: pendulum.DateTime) -> None:
        self.update_statuses(now)
        self.is_dirty = True
        self._tasks = sort_tasks_by_priority(self.tasks)

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, index: int) -> Task:
        return deepcopy(self.__get_task_ref(index))


TASK_REPO = TaskRepository()
