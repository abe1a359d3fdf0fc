# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "timegrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ENTRIES_PATH: Path = DATA_PATH / "entries.yaml"

MoveCollision = Literal["reject", "allow"]


class Configuration(TypedDict):
    data_path: Optional[str]
    include_weekends: bool
    default_entry_minutes: int
    slot_increment_minutes: int
    move_collision: MoveCollision
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "include_weekends": True,
        "default_entry_minutes": 30,
        "slot_increment_minutes": 15,
        "move_collision": "reject",
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_ENTRIES_PATH

    DATA_PATH = data_path
    DATA_ENTRIES_PATH = DATA_PATH / "entries.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if isinstance(data_path_setting, str):
        set_data_path(Path(data_path_setting))
