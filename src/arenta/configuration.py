# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "arenta"
VERSION = "v1.0.0"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_LOCK_PATH: Path = DATA_PATH / "arenta.lock"
DATA_LOG_PATH: Path = DATA_PATH / "arenta.log"


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    default_duration: NotRequired[int]
    log_level: NotRequired[str]


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "default_duration": 30,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_PATH, DATA_LOCK_PATH, DATA_LOG_PATH

    DATA_PATH = data_path
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
    DATA_LOCK_PATH = DATA_PATH / "arenta.lock"
    DATA_LOG_PATH = DATA_PATH / "arenta.log"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
