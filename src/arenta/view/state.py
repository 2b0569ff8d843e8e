# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Header above list, task and timeline views; config and --no-header turn it off
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Whether views print the arenta header before their output."""
    return _show_header_var.get()
