# SPDX-License-Identifier: MIT

import string
from dataclasses import dataclass
from typing import Optional

import pendulum

from arenta.color import NOW_CURSOR_COLOR, color_of_status
from arenta.model.task import Task
from arenta.time import local_date

UI_MAX_WIDTH = 73
START_HOUR = 8
# minutes per column
TIMELINE_TICK = 10
TASK_LETTERS = string.ascii_lowercase
MAX_TASKS = len(TASK_LETTERS)

SCALE_LABELS = (
    "8     9     10    11    12    13    14    15    16    17    18    19    20"
)
SCALE_BORDER = (
    "|-----|-----|-----|-----|-----|-----|-----|-----|-----|-----|-----|-----|"
)

LIGHT_GLYPH = "-"
STRONG_GLYPH = "="


def project_to_column(datetime: pendulum.DateTime) -> int:
    """
    Project a timestamp onto the timeline's column axis.

    Column 0 is 08:00 local time on the timestamp's own calendar day and every
    column spans TIMELINE_TICK minutes. The result is unbounded: times before
    08:00 are negative and times after 20:10 lie beyond the canvas.
    """
    local = datetime.in_tz("local")
    start_of_timeline = local.set(hour=START_HOUR, minute=0, second=0, microsecond=0)
    offset_seconds = (local - start_of_timeline).total_seconds()
    return int(offset_seconds // (TIMELINE_TICK * 60))


@dataclass(frozen=True)
class Pixel:
    content: str = " "
    color: Optional[str] = None

    def is_empty(self) -> bool:
        return self.content == " "


def _scale_row(scale: str) -> list[Pixel]:
    return [Pixel(content) for content in scale]


class TimelineCanvas:
    """
    Lays out one calendar date's task intervals on a fixed-width grid.

    Every interval is placed independently, in the order the tasks were given,
    into the first row with enough free space (including one column to the
    left of the interval for the task letter). A new row is appended when no
    existing row fits. The layout is greedy, not minimal.
    """

    def __init__(self, date: pendulum.Date, now: pendulum.DateTime) -> None:
        self.date = date
        self.now = now
        self.is_today = local_date(now) == date
        self.pos_of_now = project_to_column(now)
        self.rows: list[list[Pixel]] = []

    def render(self, tasks: list[Task]) -> list[list[Pixel]]:
        """
        Render the tasks and return the full grid including the hour scales.

        Raises:
            ValueError: If more tasks are given than there are task letters.
        """
        if len(tasks) > MAX_TASKS:
            raise ValueError(
                f"timeline holds at most {MAX_TASKS} tasks, got {len(tasks)}"
            )

        self.rows = []
        for index, task in enumerate(tasks):
            self.populate_task(task, TASK_LETTERS[index])

        grid = [_scale_row(SCALE_LABELS), _scale_row(SCALE_BORDER)]
        grid += self.rows
        grid += [_scale_row(SCALE_BORDER), _scale_row(SCALE_LABELS)]

        if self.is_today:
            self.__populate_now_cursor(grid)

        return grid

    def populate_task(self, task: Task, letter: str) -> None:
        if task["is_deleted"]:
            return

        color = color_of_status(task["status"])

        planned_start = task["planned_start"]
        planned_complete = task["planned_complete"]
        if (
            planned_start is not None
            and planned_complete is not None
            and self.__is_on_date(planned_start)
            and self.__is_on_date(planned_complete)
        ):
            self.populate_line(
                project_to_column(planned_start),
                project_to_column(planned_complete),
                letter,
                Pixel(LIGHT_GLYPH, color),
            )

        actual_start = task["actual_start"]
        actual_complete = task["actual_complete"]
        if actual_start is not None and self.__is_on_date(actual_start):
            if actual_complete is not None and self.__is_on_date(actual_complete):
                end_pos = project_to_column(actual_complete)
            elif self.is_today:
                end_pos = self.pos_of_now
            else:
                end_pos = UI_MAX_WIDTH - 1
            self.populate_line(
                project_to_column(actual_start),
                end_pos,
                letter,
                Pixel(STRONG_GLYPH, color),
            )
        elif actual_complete is not None and self.__is_on_date(actual_complete):
            # Started on an earlier day
            self.populate_line(
                0,
                project_to_column(actual_complete),
                letter,
                Pixel(STRONG_GLYPH, color),
            )

    def populate_line(
        self, start_pos: int, end_pos: int, letter: str, pixel: Pixel
    ) -> int:
        """Place an interval in the first row that fits and return that row."""
        start_pos = _clamp(start_pos, 1, UI_MAX_WIDTH - 2)
        end_pos = max(_clamp(end_pos, 1, UI_MAX_WIDTH - 2), start_pos)

        row = next(
            (
                index
                for index, existing_row in enumerate(self.rows)
                if _can_put_in_row(existing_row, start_pos, end_pos)
            ),
            None,
        )
        if row is None:
            row = self.__new_row()

        for pos in range(start_pos, end_pos + 1):
            self.rows[row][pos] = pixel
        self.rows[row][start_pos - 1] = Pixel(letter, pixel.color)
        return row

    def __new_row(self) -> int:
        self.rows.append([Pixel() for _ in range(UI_MAX_WIDTH)])
        return len(self.rows) - 1

    def __is_on_date(self, datetime: pendulum.DateTime) -> bool:
        return local_date(datetime) == self.date

    def __populate_now_cursor(self, grid: list[list[Pixel]]) -> None:
        pos = _clamp(self.pos_of_now, 0, UI_MAX_WIDTH - 1)
        top = 1
        bottom = len(grid) - 2
        grid[top][pos] = Pixel("v", NOW_CURSOR_COLOR)
        grid[bottom][pos] = Pixel("^", NOW_CURSOR_COLOR)
        for row in grid[top + 1 : bottom]:
            if row[pos].is_empty():
                row[pos] = Pixel("|", NOW_CURSOR_COLOR)


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def _can_put_in_row(row: list[Pixel], start_pos: int, end_pos: int) -> bool:
    return all(pixel.is_empty() for pixel in row[start_pos - 1 : end_pos + 1])
