# SPDX-License-Identifier: MIT

import os
from pathlib import Path

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from planning import configuration
from planning.logger import configure_logging
from planning.repository.configuration import CONFIGURATION_REPO
from planning.view import state as view_state

CONFIG_DIR_ENV_VAR = "PLANNING_CONFIG_DIR"


def initialize() -> None:
    config_dir = os.environ.get(CONFIG_DIR_ENV_VAR)
    if config_dir:
        configuration.set_config_path(Path(config_dir).expanduser())

    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_config()
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=Dumper, allow_unicode=True), encoding="utf-8"
        )
