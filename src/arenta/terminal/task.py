# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, NoReturn, Optional, cast

import pendulum
import typer

from arenta.model.filter import TaskFilter
from arenta.query.filter import filter_tasks
from arenta.query.filter_type import ComparisonOperator
from arenta.query.sort import sort_indexed_tasks_by_priority
from arenta.repository.configuration import CONFIGURATION_REPO
from arenta.repository.task import TASK_REPO, TaskIndexError
from arenta.service.task import (
    TaskValidationError,
    new_backlog_task,
    new_immediate_task,
    new_planned_task,
)
from arenta.terminal.custom_typer import AliasedTyperGroup
from arenta.terminal.parse import parse_date, parse_date_filter, parse_datetime
from arenta.terminal.validate import validate_duration, validate_index
from arenta.time import (
    datetime_to_display_local_datetime_str_optional,
    local_date,
    now_utc,
    python_to_pendulum_utc,
    python_to_pendulum_utc_optional,
)
from arenta.view.view.views import task as task_report
from arenta.view.view.views import timeline as timeline_report
from arenta.view.view.views.timeline_core import MAX_TASKS

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup)

DATETIME_HELP = "valid inputs: YYYY-MM-DD HH:mm, (H)H:mm, now, today, yesterday, tomorrow, or day offset like 1, -1"
TASK_FILE_ERROR = "task file holds an invalid task"


def _exit_with_error(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(1)


def _load_tasks() -> None:
    try:
        # Loads the task file on first access
        TASK_REPO.tasks
    except TaskValidationError as e:
        _exit_with_error(f"Error: {TASK_FILE_ERROR}: {e}")


@app.command("new, n")
def new(
    description: Annotated[Optional[str], typer.Argument()] = None,
    planned_start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--planned-start",
            "-s",
            parser=parse_datetime,
            help=DATETIME_HELP,
        ),
    ] = None,
    planned_complete: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--planned-complete",
            "-c",
            parser=parse_datetime,
            help=DATETIME_HELP,
        ),
    ] = None,
    duration: Annotated[
        Optional[int],
        typer.Option(
            "--duration",
            "-d",
            callback=validate_duration,
            help="planned time to take, in minutes",
        ),
    ] = None,
    backlog: Annotated[
        bool, typer.Option("--backlog", "-b", help="add to the backlog unscheduled")
    ] = False,
) -> None:
    """
    Create a task. Without schedule options the task starts immediately.
    Without a description the task is created interactively.
    """
    _load_tasks()
    config = CONFIGURATION_REPO.get_config()
    default_duration = config.get("default_duration", 30)

    if backlog and (
        planned_start is not None or planned_complete is not None or duration is not None
    ):
        raise typer.BadParameter("--backlog cannot be combined with a schedule")
    if planned_start is None and (planned_complete is not None or duration is not None):
        raise typer.BadParameter("--planned-start is required to plan a task")
    if planned_complete is not None and duration is not None:
        raise typer.BadParameter(
            "--planned-complete and --duration are mutually exclusive"
        )

    if description is None:
        description = typer.prompt("description")
        start_immediately = typer.confirm("start immediately?", default=True)
        if not start_immediately:
            planned_start = typer.prompt(
                "planned start", value_proc=parse_datetime
            )
            duration = typer.prompt(
                "planned time to take (in minutes)",
                type=int,
                default=default_duration,
            )

    now = now_utc()
    try:
        if backlog:
            task = new_backlog_task(description)
        elif planned_start is not None:
            start_at = python_to_pendulum_utc(planned_start)
            complete_at = python_to_pendulum_utc_optional(planned_complete)
            if complete_at is None:
                complete_at = start_at.add(minutes=duration or default_duration)
            task = new_planned_task(description, start_at, complete_at, now)
        else:
            task = new_immediate_task(description, now)
    except TaskValidationError as e:
        _exit_with_error(f"Error: {e}")

    index = TASK_REPO.save_new_task(task)
    logger.info("created %s task %d", task["status"], index)

    task_report.single_task_view(index, TASK_REPO.get_task(index), now)


@app.command("start, s", no_args_is_help=True)
def start(
    index: Annotated[int, typer.Argument(callback=validate_index)],
) -> None:
    """Start a task now."""
    _load_tasks()
    now = now_utc()
    try:
        TASK_REPO.start_task(index, now)
    except TaskIndexError as e:
        _exit_with_error(str(e))
    except TaskValidationError as e:
        _exit_with_error(f"Error: {e}")
    logger.info("started task %d", index)

    task_report.single_task_view(index, TASK_REPO.get_task(index), now)


@app.command("complete, c", no_args_is_help=True)
def complete(
    index: Annotated[int, typer.Argument(callback=validate_index)],
) -> None:
    """Complete a task now."""
    _load_tasks()
    now = now_utc()
    try:
        TASK_REPO.complete_task(index, now)
    except TaskIndexError as e:
        _exit_with_error(str(e))
    except TaskValidationError as e:
        _exit_with_error(f"Error: {e}")
    logger.info("completed task %d", index)

    task_report.single_task_view(index, TASK_REPO.get_task(index), now)


@app.command("edit, e", no_args_is_help=True)
def edit(
    index: Annotated[int, typer.Argument(callback=validate_index)],
    description: Annotated[Optional[str], typer.Option("--description")] = None,
    planned_start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--planned-start", "-ps", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    planned_complete: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--planned-complete", "-pc", parser=parse_datetime, help=DATETIME_HELP
        ),
    ] = None,
    actual_start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--actual-start", "-as", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    actual_complete: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--actual-complete", "-ac", parser=parse_datetime, help=DATETIME_HELP
        ),
    ] = None,
    remove_planned: Annotated[
        bool,
        typer.Option(
            "--remove-planned", "-rp", help="remove planned start and complete"
        ),
    ] = False,
    remove_actual_start: Annotated[
        bool, typer.Option("--remove-actual-start", "-ras")
    ] = False,
    remove_actual_complete: Annotated[
        bool, typer.Option("--remove-actual-complete", "-rac")
    ] = False,
) -> None:
    """
    Edit a task. Without options every field is offered interactively.
    """
    _load_tasks()
    try:
        task = TASK_REPO.get_task(index)
    except TaskIndexError as e:
        _exit_with_error(str(e))

    no_options = (
        description is None
        and planned_start is None
        and planned_complete is None
        and actual_start is None
        and actual_complete is None
        and not remove_planned
        and not remove_actual_start
        and not remove_actual_complete
    )

    remove_planned_start = remove_planned
    remove_planned_complete = remove_planned
    if no_options:
        new_description = typer.prompt(
            "description (press enter to keep)", default="", show_default=False
        )
        description = new_description or None
        planned_start, remove_planned_start = _prompt_datetime_update(
            "planned start", task["planned_start"]
        )
        planned_complete, remove_planned_complete = _prompt_datetime_update(
            "planned complete", task["planned_complete"]
        )
        actual_start, remove_actual_start = _prompt_datetime_update(
            "actual start", task["actual_start"]
        )
        actual_complete, remove_actual_complete = _prompt_datetime_update(
            "actual complete", task["actual_complete"]
        )

    now = now_utc()
    try:
        TASK_REPO.modify_task(
            index,
            now,
            description=description,
            planned_start=python_to_pendulum_utc_optional(planned_start),
            planned_complete=python_to_pendulum_utc_optional(planned_complete),
            actual_start=python_to_pendulum_utc_optional(actual_start),
            actual_complete=python_to_pendulum_utc_optional(actual_complete),
            remove_planned_start=remove_planned_start,
            remove_planned_complete=remove_planned_complete,
            remove_actual_start=remove_actual_start,
            remove_actual_complete=remove_actual_complete,
        )
    except TaskValidationError as e:
        _exit_with_error(f"Error: {e}")
    logger.info("edited task %d", index)

    task_report.single_task_view(index, TASK_REPO.get_task(index), now)


def _prompt_datetime_update(
    hint: str, current: Optional[pendulum.DateTime]
) -> tuple[Optional[pendulum.DateTime], bool]:
    """Ask whether to update a timestamp. Returns (new value, remove flag)."""
    current_str = datetime_to_display_local_datetime_str_optional(current) or "unset"
    if not typer.confirm(f"update {hint} ({current_str})?", default=False):
        return None, False
    if current is not None and typer.confirm(f"reset {hint}?", default=False):
        return None, True
    return typer.prompt(hint, value_proc=parse_datetime), False


@app.command("delete", no_args_is_help=True)
def delete(
    index: Annotated[int, typer.Argument(callback=validate_index)],
) -> None:
    """Mark a task as deleted. Its index stays in use until purge."""
    _load_tasks()
    try:
        TASK_REPO.delete_task(index)
    except TaskIndexError as e:
        _exit_with_error(str(e))
    logger.info("deleted task %d", index)

    typer.echo(f"task {index} deleted")


@app.command("purge")
def purge() -> None:
    """Remove deleted tasks for good. Remaining tasks are renumbered."""
    _load_tasks()
    purged = TASK_REPO.purge_deleted_tasks()
    logger.info("purged %d tasks", purged)

    typer.echo(f"{purged} deleted task{'' if purged == 1 else 's'} purged")


@app.command("list, ls")
def list_tasks(
    date_filter: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            help="[op]date with op in <, <=, =, >, >= and date as YYYY-MM-DD, today, yesterday, tomorrow or a day offset; a bare number n means the recent n days",
        ),
    ] = None,
    no_backlog: Annotated[
        bool, typer.Option("--no-backlog", "-nb", help="hide backlog tasks")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="show all timestamps")
    ] = False,
    sort: Annotated[
        bool,
        typer.Option("--sort/--no-sort", help="rank the list by priority"),
    ] = True,
    timeline: Annotated[
        bool, typer.Option("--timeline", "-t", help="chart a single day")
    ] = False,
    on: Annotated[
        Optional[str],
        typer.Option(
            "--on",
            help="date charted by --timeline (default: today)",
        ),
    ] = None,
) -> None:
    """
    List tasks ranked by priority, or chart a single day with --timeline.
    """
    _load_tasks()
    now = now_utc()
    today = local_date(now)
    timeline_date = cast(pendulum.Date, parse_date(on, today) if on else today)

    if date_filter is not None:
        operator, reference_date = parse_date_filter(date_filter, today)
    elif timeline:
        operator, reference_date = ComparisonOperator.EQ, timeline_date
    else:
        operator, reference_date = ComparisonOperator.GE, today

    task_filter: TaskFilter = {
        "operator": operator,
        "reference_date": reference_date,
        "include_backlog": not no_backlog and not timeline,
        "verbose": verbose,
    }

    TASK_REPO.update_statuses(now)
    visible_tasks = filter_tasks(TASK_REPO.get_all_tasks(), task_filter)

    if timeline:
        if len(visible_tasks) > MAX_TASKS:
            logger.warning(
                "timeline shows the first %d of %d tasks",
                MAX_TASKS,
                len(visible_tasks),
            )
            visible_tasks = visible_tasks[:MAX_TASKS]
        timeline_report.timeline_view(visible_tasks, timeline_date, now)
        return

    if sort:
        visible_tasks = sort_indexed_tasks_by_priority(visible_tasks)
    task_report.tasks_view("tasks", visible_tasks, now, verbose=task_filter["verbose"])


@app.command("sort")
def sort() -> None:
    """Reorder the stored tasks by priority. Indexes change accordingly."""
    _load_tasks()
    now = now_utc()
    TASK_REPO.sort_tasks(now)
    logger.info("sorted tasks")

    task_report.tasks_view("tasks", list(enumerate(TASK_REPO.get_all_tasks())), now)
