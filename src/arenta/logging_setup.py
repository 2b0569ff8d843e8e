# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    *,
    log_file: Path,
    console_level: int | str = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler: rich-formatted, on stderr, at the configured level
    - File handler: full logs for debugging

    Call this once, before the first command runs.
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console_handler = RichHandler(
        console=Console(stderr=True), show_time=False, show_path=False
    )
    console_handler.setLevel(console_level)
    root.addHandler(console_handler)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(file_handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
