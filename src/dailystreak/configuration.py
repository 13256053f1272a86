# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

import platformdirs

APP_NAME = "dailystreak"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DEFAULT_DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)

StorageType = Literal["yaml", "memory"]


class Configuration(TypedDict):
    storage: StorageType
    data_path: Optional[str]  # Overrides DEFAULT_DATA_PATH
    default_user: Optional[str]
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "storage": "yaml",
        "data_path": None,
        "default_user": None,
        "log_level": "WARNING",
    }


class DataPaths(TypedDict):
    activities: Path
    streaks: Path
    users: Path


def get_data_path(config: Configuration) -> Path:
    if config["data_path"] is not None:
        return Path(config["data_path"]).expanduser()
    return DEFAULT_DATA_PATH


def get_data_paths(config: Configuration) -> DataPaths:
    data_path = get_data_path(config)
    return {
        "activities": data_path / "activities",
        "streaks": data_path / "streaks",
        "users": data_path / "users",
    }
