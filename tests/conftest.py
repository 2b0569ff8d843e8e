# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pendulum
import pytest
from yaml import dump

from arenta import configuration
from arenta.model.task import Task
from arenta.repository.configuration import CONFIGURATION_REPO
from arenta.repository.task import TASK_REPO
from arenta.service.task import update_status
from arenta.template.task import get_task_template
from arenta.view import state as view_state


@pytest.fixture()
def data_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point configuration and data files at a per-test directory.

    The module-level repositories cache what they load, so their caches are
    dropped as well.
    """
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    config_path.mkdir()
    data_path.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", data_path / "tasks.yaml")
    monkeypatch.setattr(configuration, "DATA_LOCK_PATH", data_path / "arenta.lock")
    monkeypatch.setattr(configuration, "DATA_LOG_PATH", data_path / "arenta.log")

    configuration.APP_CONFIG_PATH.write_text(
        dump(configuration.get_default_configuration())
    )

    monkeypatch.setattr(TASK_REPO, "_tasks", None)
    monkeypatch.setattr(TASK_REPO, "is_dirty", False)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)

    view_state.set_show_header(True)

    return data_path


@pytest.fixture()
def at() -> Callable[..., pendulum.DateTime]:
    """Build local timestamps on a fixed reference day (2024-03-01)."""

    def _at(hour: int, minute: int = 0, *, day: int = 1) -> pendulum.DateTime:
        return pendulum.datetime(2024, 3, day, hour, minute, tz="local")

    return _at


@pytest.fixture()
def make_task() -> Callable[..., Task]:
    """Build a task from keyword timestamps, with its status derived at `now`."""

    def _make_task(
        description: str = "task",
        *,
        planned_start: Optional[pendulum.DateTime] = None,
        planned_complete: Optional[pendulum.DateTime] = None,
        actual_start: Optional[pendulum.DateTime] = None,
        actual_complete: Optional[pendulum.DateTime] = None,
        now: Optional[pendulum.DateTime] = None,
        is_deleted: bool = False,
    ) -> Task:
        task = get_task_template()
        task["description"] = description
        task["planned_start"] = planned_start
        task["planned_complete"] = planned_complete
        task["actual_start"] = actual_start
        task["actual_complete"] = actual_complete
        task["is_deleted"] = is_deleted
        if now is not None:
            update_status(task, now)
        return task

    return _make_task
