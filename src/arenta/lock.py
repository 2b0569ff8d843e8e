# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LockError(Exception):
    """Raised when the lock file is already held by another process."""

    pass


def acquire_lock(lock_path: Path) -> None:
    try:
        # Exclusive creation fails if the file already exists
        with lock_path.open("x"):
            pass
    except FileExistsError as e:
        raise LockError(
            "lock file has been acquired by another process now"
        ) from e
    logger.debug("acquired lock %s", lock_path)


def release_lock(lock_path: Path) -> None:
    lock_path.unlink(missing_ok=True)
    logger.debug("released lock %s", lock_path)
