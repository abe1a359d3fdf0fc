# SPDX-License-Identifier: MIT

import atexit

from timegrid import workspace
from timegrid.repository.configuration import CONFIGURATION_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()

    # Only write entries when something loaded them
    if workspace.is_loaded():
        workspace.get_workspace().flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
