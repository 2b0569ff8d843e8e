# SPDX-License-Identifier: MIT

import pendulum
from rich.console import Console
from rich.text import Text

from arenta.color import DELETED_TASK_COLOR, color_of_status
from arenta.model.task import Task
from arenta.time import date_to_display_str
from arenta.view.view.views.header import header
from arenta.view.view.views.timeline_core import (
    TASK_LETTERS,
    Pixel,
    TimelineCanvas,
)


def timeline_view(
    indexed_tasks: list[tuple[int, Task]],
    date: pendulum.Date,
    now: pendulum.DateTime,
) -> None:
    """
    Display the visible tasks of a single date on an ASCII timeline.

    Tasks are lettered a..z in the order given, followed by a legend mapping
    each letter back to its task index.

    Args:
        indexed_tasks: Visible tasks paired with their collection index
        date: The local calendar date to chart
        now: The current instant, used for the now cursor and ongoing tasks
    """
    header("timeline")

    console = Console()

    canvas = TimelineCanvas(date, now)
    grid = canvas.render([task for _, task in indexed_tasks])

    console.print(f"\n[bold]{date_to_display_str(date)}[/bold]\n")
    for row in grid:
        console.print(render_row(row), no_wrap=True, overflow="crop")

    console.print()
    for letter, (index, task) in zip(TASK_LETTERS, indexed_tasks):
        if task["is_deleted"]:
            line = Text(f"{letter}  [{index}] (deleted)", style=DELETED_TASK_COLOR)
        else:
            line = Text(f"{letter}  ", style=color_of_status(task["status"]))
            line.append(f"[{index}] {task['description']}")
        console.print(line)
    console.print()


def render_row(row: list[Pixel]) -> Text:
    text = Text()
    for pixel in row:
        text.append(pixel.content, style=pixel.color or "")
    return text
