# SPDX-License-Identifier: MIT

from arenta.model.task import TaskStatus

# Color constants for timeline and list decorations
NOW_CURSOR_COLOR = "red"
DELETED_TASK_COLOR = "bright_black"
INDEX_COLOR = "sandy_brown"


def color_of_status(status: TaskStatus) -> str:
    """Return the Rich color name used to paint a task in the given status."""
    match status:
        case TaskStatus.BACKLOG:
            return "bright_black"
        case TaskStatus.PLANNED:
            return "cyan"
        case TaskStatus.OVERDUE:
            return "red"
        case TaskStatus.ONGOING:
            return "yellow"
        case TaskStatus.COMPLETE:
            return "green"
