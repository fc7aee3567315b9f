# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from planning import configuration


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
        if configuration.APP_CONFIG_PATH.is_file():
            self._config = load(
                configuration.APP_CONFIG_PATH.read_text(encoding="utf-8"),
                Loader=Loader,
            )
        if self._config is None:
            self._config = configuration.get_default_config()
            return

        # Back-fill settings added after the config file was written
        for key, value in configuration.get_default_config().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=Dumper, allow_unicode=True), encoding="utf-8"
        )

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        plannings_path: Optional[str] = None,
        remove_plannings_path: bool = False,
        locale: Optional[str] = None,
        name_column: Optional[str] = None,
        status_column: Optional[str] = None,
        dates_column: Optional[str] = None,
        fallback_span_days: Optional[int] = None,
        day_width: Optional[int] = None,
        left_column_width: Optional[int] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if plannings_path is not None:
            self.config["plannings_path"] = plannings_path
        if remove_plannings_path:
            self.config["plannings_path"] = None
        if locale is not None:
            self.config["locale"] = locale
        if name_column is not None:
            self.config["name_column"] = name_column
        if status_column is not None:
            self.config["status_column"] = status_column
        if dates_column is not None:
            self.config["dates_column"] = dates_column
        if fallback_span_days is not None:
            self.config["fallback_span_days"] = fallback_span_days
        if day_width is not None:
            self.config["day_width"] = day_width
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
