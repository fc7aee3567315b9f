# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "planning"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"


class Configuration(TypedDict):
    plannings_path: Optional[str]
    locale: str
    name_column: str
    status_column: str
    dates_column: str
    fallback_span_days: int
    day_width: int
    left_column_width: int
    show_header: bool
    log_level: str


def get_default_config() -> Configuration:
    return {
        "plannings_path": None,
        "locale": "fr",
        "name_column": "Nom",
        "status_column": "Statut",
        "dates_column": "Dates",
        "fallback_span_days": 7,
        "day_width": 2,
        "left_column_width": 40,
        "show_header": True,
        "log_level": DEFAULT_LOG_LEVEL,
    }


def set_config_path(config_path: Path) -> None:
    """
    Point the application at another configuration directory.

    Must be called before the configuration repository is first read.
    """
    global CONFIG_PATH, APP_CONFIG_PATH

    CONFIG_PATH = config_path
    APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


def get_plannings_path(config: Configuration) -> Path:
    plannings_path = config.get("plannings_path")
    if plannings_path is None:
        return Path.cwd()
    return Path(plannings_path).expanduser()
