# SPDX-License-Identifier: MIT

import atexit

from arenta import configuration
from arenta.lock import release_lock
from arenta.repository.configuration import CONFIGURATION_REPO
from arenta.repository.task import TASK_REPO


def flush_and_sync() -> None:
    try:
        CONFIGURATION_REPO.flush()
        TASK_REPO.flush()
    finally:
        release_lock(configuration.DATA_LOCK_PATH)


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
