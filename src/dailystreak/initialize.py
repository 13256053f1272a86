# SPDX-License-Identifier: MIT

import logging

from dailystreak import configuration
from dailystreak.configuration import Configuration
from dailystreak.exceptions import ValidationError
from dailystreak.repository.activity import ActivityRepository
from dailystreak.repository.configuration import (
    STORAGE_TYPES,
    ConfigurationRepository,
)
from dailystreak.repository.streak import StreakRepository
from dailystreak.repository.user import UserRepository
from dailystreak.service.tracking import TrackingService

logger = logging.getLogger(__name__)


def initialize(repository: ConfigurationRepository) -> Configuration:
    """Create the config file and data directories on first run."""
    config = repository.get_config()
    if not repository.exists():
        logger.info("Writing default configuration")
        repository.is_dirty = True
        repository.flush()

    if config["storage"] == "yaml":
        for path in configuration.get_data_paths(config).values():
            path.mkdir(parents=True, exist_ok=True)
    return config


def build_service(config: Configuration) -> TrackingService:
    if config["storage"] not in STORAGE_TYPES:
        raise ValidationError(f"Unknown storage type '{config['storage']}'")

    if config["storage"] == "memory":
        logger.debug("Using in-memory storage")
        return TrackingService(
            ActivityRepository(), StreakRepository(), UserRepository()
        )

    data_paths = configuration.get_data_paths(config)
    logger.debug("Using YAML storage at %s", configuration.get_data_path(config))
    return TrackingService(
        ActivityRepository(data_paths["activities"]),
        StreakRepository(data_paths["streaks"]),
        UserRepository(data_paths["users"]),
    )
