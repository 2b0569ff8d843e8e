# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from arenta import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: fill in fields added after the config file was created
        defaults = configuration.get_default_configuration()
        if "data_path" not in self._config:
            self._config["data_path"] = None
        if "default_duration" not in self._config:
            self._config["default_duration"] = defaults["default_duration"]
        if "log_level" not in self._config:
            self._config["log_level"] = defaults["log_level"]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        default_duration: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if default_duration is not None:
            self.config["default_duration"] = default_duration
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
