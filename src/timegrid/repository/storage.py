# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, TypedDict, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timegrid import time
from timegrid.model.entry import Entry
from timegrid.repository.entry import EntryRepository

logger = logging.getLogger(__name__)


class StoredData(TypedDict):
    next_entry_id: int
    next_worklog_id: int
    entries: list[Entry]


class EntryStorage:
    """Reads and writes the entry collection as a single YAML document."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> StoredData:
        if not self.path.is_file():
            logger.debug("No entry file at %s, starting empty", self.path)
            return {"next_entry_id": 1, "next_worklog_id": 1, "entries": []}

        raw = load(self.path.read_text(), Loader=Loader)
        if raw is None:
            raw = {}
        entries = [
            self.__convert_entry_for_deserialization(raw_entry)
            for raw_entry in raw.get("entries") or []
        ]
        logger.debug("Loaded %s entries from %s", len(entries), self.path)
        return {
            "next_entry_id": raw.get("next_entry_id", 1),
            "next_worklog_id": raw.get("next_worklog_id", 1),
            "entries": entries,
        }

    def save(self, data: StoredData) -> None:
        serializable: dict[str, Any] = {
            "next_entry_id": data["next_entry_id"],
            "next_worklog_id": data["next_worklog_id"],
            "entries": [
                self.__convert_entry_for_serialization(deepcopy(entry))
                for entry in data["entries"]
            ],
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(dump(serializable, Dumper=Dumper, sort_keys=False))
        logger.debug("Wrote %s entries to %s", len(data["entries"]), self.path)

    def load_repository(self, **kwargs: Any) -> EntryRepository:
        data = self.load()
        return EntryRepository(
            entries=data["entries"],
            next_entry_id=data["next_entry_id"],
            next_worklog_id=data["next_worklog_id"],
            **kwargs,
        )

    def flush(self, repository: EntryRepository) -> bool:
        if not repository.is_dirty:
            return False
        self.save(
            {
                "next_entry_id": repository.next_entry_id,
                "next_worklog_id": repository.next_worklog_id,
                "entries": repository.get_all_entries(),
            }
        )
        repository.is_dirty = False
        return True

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], entry)
        serializable_entry["classification"] = dict(entry["classification"])
        serializable_entry["day"] = time.date_to_iso_str_optional(entry["day"])
        serializable_entry["created"] = time.datetime_to_iso_str(entry["created"])
        serializable_entry["updated"] = time.datetime_to_iso_str(entry["updated"])
        serializable_entry["worklogs"] = [
            {
                **worklog,
                "date": time.date_to_iso_str(worklog["date"]),
            }
            for worklog in entry["worklogs"]
        ]
        return serializable_entry

    def __convert_entry_for_deserialization(self, entry: dict[str, Any]) -> Entry:
        deserializable_entry = entry
        deserializable_entry["day"] = time.date_from_str_optional(entry["day"])
        deserializable_entry["created"] = time.datetime_from_str(entry["created"])
        deserializable_entry["updated"] = time.datetime_from_str(entry["updated"])
        deserializable_entry["worklogs"] = [
            {
                **worklog,
                "date": time.date_from_str(worklog["date"]),
            }
            for worklog in entry.get("worklogs") or []
        ]
        return cast(Entry, deserializable_entry)
