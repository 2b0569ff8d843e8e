# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from arenta import configuration
from arenta.lock import acquire_lock
from arenta.logging_setup import setup_logging
from arenta.repository.configuration import CONFIGURATION_REPO
from arenta.view import state as view_state


def initialize() -> None:
    """
    Prepare configuration, data directory, logging and the process lock.

    Raises:
        LockError: If another process holds the lock file.
    """
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    setup_logging(
        log_file=configuration.DATA_LOG_PATH,
        console_level=config.get("log_level", "WARNING").upper(),
    )

    acquire_lock(configuration.DATA_LOCK_PATH)


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
