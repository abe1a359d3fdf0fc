# SPDX-License-Identifier: MIT

from typing import Optional

from timegrid import configuration
from timegrid.repository.configuration import CONFIGURATION_REPO
from timegrid.repository.entry import EntryRepository
from timegrid.repository.storage import EntryStorage


class Workspace:
    """Owns the entry repository and the storage it was loaded from."""

    def __init__(self, storage: EntryStorage, repository: EntryRepository) -> None:
        self.storage = storage
        self.repository = repository

    def flush(self) -> bool:
        return self.storage.flush(self.repository)


_workspace: Optional[Workspace] = None


def get_workspace() -> Workspace:
    global _workspace

    if _workspace is None:
        storage = EntryStorage(configuration.DATA_ENTRIES_PATH)
        repository = storage.load_repository(config=CONFIGURATION_REPO.get_config())
        _workspace = Workspace(storage, repository)
    return _workspace


def get_entry_repo() -> EntryRepository:
    return get_workspace().repository


def is_loaded() -> bool:
    return _workspace is not None


def reset_workspace() -> None:
    global _workspace

    _workspace = None
