# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timegrid import configuration
from timegrid.errors import ValidationError

logger = logging.getLogger(__name__)

MOVE_COLLISION_VALUES = ("reject", "allow")
LOG_LEVEL_VALUES = ("DEBUG", "INFO", "WARNING", "ERROR")


def check_config_value(key: str, value: Any) -> Any:
    """
    Validate one configuration value and return it normalized.

    Raises:
        ValidationError: if the value is not allowed for the key
    """
    match key:
        case "data_path":
            if value is not None and not isinstance(value, str):
                raise ValidationError("data_path must be a path")
        case "include_weekends":
            if not isinstance(value, bool):
                raise ValidationError("include_weekends must be true or false")
        case "default_entry_minutes":
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValidationError("default_entry_minutes must be positive")
        case "slot_increment_minutes":
            if (
                isinstance(value, bool)
                or not isinstance(value, int)
                or value <= 0
                or 60 % value != 0
            ):
                raise ValidationError("slot_increment_minutes must divide 60")
        case "move_collision":
            if value not in MOVE_COLLISION_VALUES:
                raise ValidationError(
                    f"move_collision must be one of {', '.join(MOVE_COLLISION_VALUES)}"
                )
        case "log_level":
            if not isinstance(value, str) or value.upper() not in LOG_LEVEL_VALUES:
                raise ValidationError(
                    f"log_level must be one of {', '.join(LOG_LEVEL_VALUES)}"
                )
            return value.upper()
    return value


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
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = configuration.get_default_configuration()
            return

        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        self._config = configuration.get_default_configuration()
        if loaded is None:
            return

        # Keys missing from older config files keep their defaults
        for key, value in loaded.items():
            if key not in self._config:
                logger.info("Ignoring unknown configuration key '%s'", key)
                continue
            try:
                self._config[key] = check_config_value(key, value)  # type: ignore[literal-required]
            except ValidationError as e:
                logger.warning(
                    "Invalid %s in %s, using default %r: %s",
                    key,
                    configuration.APP_CONFIG_PATH,
                    self._config[key],  # type: ignore[literal-required]
                    e,
                )

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
        logger.debug("Wrote configuration to %s", configuration.APP_CONFIG_PATH)

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        include_weekends: Optional[bool] = None,
        default_entry_minutes: Optional[int] = None,
        slot_increment_minutes: Optional[int] = None,
        move_collision: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        changes = {
            "data_path": data_path,
            "include_weekends": include_weekends,
            "default_entry_minutes": default_entry_minutes,
            "slot_increment_minutes": slot_increment_minutes,
            "move_collision": move_collision,
            "log_level": log_level,
        }
        checked = {
            key: check_config_value(key, value)
            for key, value in changes.items()
            if value is not None
        }

        self.is_dirty = True

        for key, value in checked.items():
            self.config[key] = value  # type: ignore[literal-required]
        if remove_data_path:
            self.config["data_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
