# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from dailystreak import configuration
from dailystreak.exceptions import StoreError, ValidationError

STORAGE_TYPES = ("yaml", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path if path is not None else configuration.APP_CONFIG_PATH
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
        config = configuration.get_default_configuration()
        if self._path.is_file():
            try:
                loaded = load(self._path.read_text(), Loader=Loader)
            except (OSError, YAMLError) as e:
                raise StoreError(f"Failed to read configuration {self._path}") from e
            if loaded is not None and not isinstance(loaded, dict):
                raise StoreError(f"Configuration {self._path} must be a mapping")
            # Back-fill keys missing from older config files
            if loaded is not None:
                config.update(loaded)
            self.__validate_loaded(config)
        self._config = config

    def __validate_loaded(self, config: configuration.Configuration) -> None:
        if config["storage"] not in STORAGE_TYPES:
            raise StoreError(
                f"Configuration {self._path}: unknown storage '{config['storage']}'"
            )
        if str(config["log_level"]).upper() not in LOG_LEVELS:
            raise StoreError(
                f"Configuration {self._path}: unknown log_level '{config['log_level']}'"
            )
        if config["data_path"] is not None and not isinstance(config["data_path"], str):
            raise StoreError(f"Configuration {self._path}: data_path must be a string")
        if config["default_user"] is not None and not isinstance(
            config["default_user"], str
        ):
            raise StoreError(f"Configuration {self._path}: default_user must be a string")

    def __save_data(self, config: configuration.Configuration) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(dump(dict(config), Dumper=Dumper))
        except (OSError, YAMLError) as e:
            raise StoreError(f"Failed to write configuration {self._path}") from e

    def exists(self) -> bool:
        return self._path.is_file()

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        storage: Optional[str] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        default_user: Optional[str] = None,
        remove_default_user: bool = False,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if storage is not None:
            if storage not in STORAGE_TYPES:
                raise ValidationError(f"storage must be 'yaml' or 'memory', got '{storage}'")
            self.config["storage"] = storage  # type: ignore[typeddict-item]
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if default_user is not None:
            self.config["default_user"] = default_user
        if remove_default_user:
            self.config["default_user"] = None
        if log_level is not None:
            if log_level.upper() not in LOG_LEVELS:
                raise ValidationError(
                    f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
                )
            self.config["log_level"] = log_level.upper()
