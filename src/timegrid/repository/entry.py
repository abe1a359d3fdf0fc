# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Callable, Iterable, Optional

import pendulum

from timegrid import configuration
from timegrid.errors import FormatError, NotFoundError, ValidationError
from timegrid.model.classification import GROUP_KEYS, Classification
from timegrid.model.entity_id import EntityId, IdSequence
from timegrid.model.entry import Entry, EntryFields
from timegrid.model.worklog import Worklog
from timegrid.template.entry import get_classification_template, get_entry_template
from timegrid.template.worklog import get_worklog_template
from timegrid.time import (
    MINUTES_PER_DAY,
    clock_to_minutes,
    is_calendar_date,
    minutes_to_clock,
    now_utc,
    window_minutes,
)

logger = logging.getLogger(__name__)

PIXELS_PER_MINUTE = 1.5
MIN_ENTRY_HEIGHT = 20


def height_to_minutes(height: float) -> int:
    """Convert a rendered entry height back into whole minutes."""
    return round(max(height, MIN_ENTRY_HEIGHT) / PIXELS_PER_MINUTE)


class EntryRepository:
    """
    In-memory collection of scheduled entries and their worklogs.

    Every mutation builds a complete replacement entry and swaps it into the
    collection in a single assignment, so readers only ever see whole
    entries. All returned entries are copies.
    """

    def __init__(
        self,
        entries: Optional[Iterable[Entry]] = None,
        next_entry_id: int = 1,
        next_worklog_id: int = 1,
        config: Optional[configuration.Configuration] = None,
        clock: Callable[[], pendulum.DateTime] = now_utc,
    ) -> None:
        self._entries: list[Entry] = deepcopy(list(entries or []))
        self._entry_ids = IdSequence(next_entry_id)
        self._worklog_ids = IdSequence(next_worklog_id)
        self._config = config or configuration.get_default_configuration()
        self._clock = clock
        self.version = 0
        self.is_dirty = False

        # Never hand out an id that loaded data already uses
        for entry in self._entries:
            if entry["id"] is not None:
                self._entry_ids.advance_past(entry["id"])
            for worklog in entry["worklogs"]:
                if worklog["id"] is not None:
                    self._worklog_ids.advance_past(worklog["id"])

    @property
    def next_entry_id(self) -> int:
        return self._entry_ids.next_id

    @property
    def next_worklog_id(self) -> int:
        return self._worklog_ids.next_id

    def __commit(self, entries: list[Entry]) -> None:
        self._entries = entries
        self.version += 1
        self.is_dirty = True

    def __replace(self, replacement: Entry) -> None:
        self.__commit(
            [
                replacement if entry["id"] == replacement["id"] else entry
                for entry in self._entries
            ]
        )

    def __find(self, id: EntityId) -> Entry:
        for entry in self._entries:
            if entry["id"] == id:
                return entry
        raise NotFoundError(f"Entry {id} does not exist")

    def __slot_taken(
        self,
        day: pendulum.Date,
        start_minutes: int,
        ignore_id: Optional[EntityId] = None,
    ) -> bool:
        for entry in self._entries:
            if entry["id"] == ignore_id or entry["day"] != day:
                continue
            if clock_to_minutes(entry["start"]) == start_minutes:
                return True
        return False

    def __check_slot(
        self,
        day: pendulum.Date,
        start_minutes: int,
        ignore_id: Optional[EntityId] = None,
    ) -> None:
        if self._config["move_collision"] != "reject":
            return
        if self.__slot_taken(day, start_minutes, ignore_id=ignore_id):
            logger.info("Rejected entry %s on an occupied slot", ignore_id)
            raise ValidationError(
                f"Slot {minutes_to_clock(start_minutes)} on "
                f"{day.to_date_string()} is already occupied"
            )

    def __validate_fields(self, fields: EntryFields) -> Entry:
        """
        Validate a field bundle and return a fresh entry built from it.

        Raises ValidationError listing every missing field at once.
        """
        summary = fields.get("summary")
        start = fields.get("start")
        end = fields.get("end")
        day = fields.get("day")

        missing = []
        if summary is None or not summary.strip():
            missing.append("summary")
        if not start:
            missing.append("start")
        if not end:
            missing.append("end")
        if day is None:
            missing.append("day")
        if len(missing) > 0:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        if not is_calendar_date(day):
            raise ValidationError(f"Day must be a calendar date, got {day!r}")

        assert summary is not None and start is not None and end is not None
        start_minutes = clock_to_minutes(start)
        end_minutes = clock_to_minutes(end)
        if start_minutes >= end_minutes:
            raise ValidationError(f"Start {start} must be before end {end}")

        entry = get_entry_template()
        entry["summary"] = summary.strip()
        entry["day"] = day
        entry["start"] = minutes_to_clock(start_minutes)
        entry["end"] = minutes_to_clock(end_minutes)
        entry["classification"] = self.__validate_classification(
            fields.get("classification")
        )
        return entry

    def __validate_classification(
        self, classification: Optional[Classification]
    ) -> Classification:
        result = get_classification_template()
        if classification is None:
            return result
        for key, value in classification.items():
            if key not in GROUP_KEYS:
                raise ValidationError(f"Unknown classification key '{key}'")
            result[key] = "" if value is None else str(value)  # type: ignore[literal-required]
        return result

    def add(self, fields: EntryFields) -> Entry:
        entry = self.__validate_fields(fields)
        self.__check_slot(entry["day"], clock_to_minutes(entry["start"]))
        entry["id"] = self._entry_ids.generate()
        self.__commit([*self._entries, entry])
        logger.debug(
            "Added entry %s on %s %s-%s",
            entry["id"],
            entry["day"],
            entry["start"],
            entry["end"],
        )
        return deepcopy(entry)

    def place_from_slot_click(
        self, day: pendulum.Date, time: str
    ) -> Optional[Entry]:
        """
        Build an unsaved draft entry for a clicked grid slot.

        Returns None when an entry on that day already starts at the slot;
        a time between slots raises ValidationError.
        The draft end is the start plus the configured default length; it
        wraps past midnight instead of moving to the next day.
        """
        start_minutes = clock_to_minutes(time)
        increment = self._config["slot_increment_minutes"]
        if start_minutes % increment != 0:
            raise ValidationError(
                f"{time} is not on a {increment} minute grid slot"
            )
        if self.__slot_taken(day, start_minutes):
            logger.info("Slot %s on %s is occupied", time, day)
            return None

        end_minutes = (
            start_minutes + self._config["default_entry_minutes"]
        ) % MINUTES_PER_DAY

        draft = get_entry_template()
        draft["day"] = day
        draft["start"] = minutes_to_clock(start_minutes)
        draft["end"] = minutes_to_clock(end_minutes)
        return draft

    def move(self, id: EntityId, new_day: pendulum.Date, new_hour: int) -> Entry:
        """
        Move an entry to the top of another grid hour, keeping its length.

        Raises:
            NotFoundError: if the entry does not exist
            ValidationError: if the hour is invalid, the moved window would
                run past midnight, or the slot is taken and collisions are
                rejected
        """
        entry = self.__find(id)
        if not is_calendar_date(new_day):
            raise ValidationError(f"Day must be a calendar date, got {new_day!r}")
        if not 0 <= new_hour <= 23:
            raise ValidationError(f"Hour must be between 0 and 23, got {new_hour}")

        duration = window_minutes(entry["start"], entry["end"])
        new_start_minutes = new_hour * 60
        new_end_minutes = new_start_minutes + duration
        if new_end_minutes >= MINUTES_PER_DAY:
            logger.info("Rejected move of entry %s past midnight", id)
            raise ValidationError(
                f"Moving entry {id} to {minutes_to_clock(new_start_minutes)} "
                "would end after midnight"
            )

        self.__check_slot(new_day, new_start_minutes, ignore_id=id)

        moved = deepcopy(entry)
        moved["day"] = new_day
        moved["start"] = minutes_to_clock(new_start_minutes)
        moved["end"] = minutes_to_clock(new_end_minutes)
        moved["updated"] = self._clock()
        self.__replace(moved)
        logger.debug(
            "Moved entry %s to %s %s-%s", id, new_day, moved["start"], moved["end"]
        )
        return deepcopy(moved)

    def resize(self, id: EntityId, new_visual_height: float) -> Entry:
        """
        Acknowledge a drag-resize of an entry.

        Resizing only changes what is drawn while the pointer is held; the
        stored window changes through edit. The entry is returned unchanged.
        """
        entry = self.__find(id)
        logger.debug(
            "Entry %s resized to %s px (%s min), not persisted",
            id,
            new_visual_height,
            height_to_minutes(new_visual_height),
        )
        return deepcopy(entry)

    def edit(self, id: EntityId, fields: EntryFields) -> Entry:
        existing = self.__find(id)
        edited = self.__validate_fields(fields)
        self.__check_slot(edited["day"], clock_to_minutes(edited["start"]), ignore_id=id)
        edited["id"] = id
        edited["worklogs"] = deepcopy(existing["worklogs"])
        edited["created"] = existing["created"]
        edited["updated"] = self._clock()
        self.__replace(edited)
        logger.debug("Edited entry %s", id)
        return deepcopy(edited)

    def remove(self, id: EntityId) -> None:
        remaining = [entry for entry in self._entries if entry["id"] != id]
        if len(remaining) == len(self._entries):
            logger.debug("Remove of unknown entry %s ignored", id)
            return
        self.__commit(remaining)
        logger.debug("Removed entry %s", id)

    def append_or_replace_worklog(self, id: EntityId, worklog: Worklog) -> Entry:
        """
        Save a worklog against an entry, keyed by the worklog date.

        An existing worklog for the same date is replaced; otherwise the
        worklog is appended. The saved worklog gets a new id either way.

        Raises:
            FormatError: if the worklog has no parsed duration
            NotFoundError: if the entry does not exist
            ValidationError: if the worklog date or start is malformed
        """
        if not is_calendar_date(worklog["date"]):
            raise ValidationError(
                f"Worklog date must be a calendar date, got {worklog['date']!r}"
            )
        duration_seconds = worklog["duration_seconds"]
        if duration_seconds is None:
            raise FormatError("Worklog duration was not parsed")
        if duration_seconds < 0:
            raise FormatError(f"Worklog duration cannot be negative: {duration_seconds}")

        entry = self.__find(id)
        if worklog["start"] is not None:
            clock_to_minutes(worklog["start"])

        saved = deepcopy(worklog)
        saved["id"] = self._worklog_ids.generate()

        updated = deepcopy(entry)
        updated["worklogs"] = [
            existing
            for existing in updated["worklogs"]
            if existing["date"] != saved["date"]
        ]
        updated["worklogs"].append(saved)
        updated["updated"] = self._clock()
        self.__replace(updated)
        logger.debug(
            "Saved worklog %s for entry %s on %s (%ss)",
            saved["id"],
            id,
            saved["date"],
            duration_seconds,
        )
        return deepcopy(updated)

    def add_worklog_seconds(
        self, id: EntityId, date: pendulum.Date, seconds: int
    ) -> Entry:
        """Add seconds to the worklog for a date, creating it if needed."""
        existing = self.get_worklog(id, date)
        if existing is None:
            worklog = get_worklog_template(date)
            worklog["duration_seconds"] = seconds
        else:
            worklog = existing
            worklog["duration_seconds"] = (existing["duration_seconds"] or 0) + seconds
        return self.append_or_replace_worklog(id, worklog)

    def get_worklog(self, id: EntityId, date: pendulum.Date) -> Optional[Worklog]:
        entry = self.__find(id)
        for worklog in entry["worklogs"]:
            if worklog["date"] == date:
                return deepcopy(worklog)
        return None

    def get_all_entries(self) -> list[Entry]:
        return deepcopy(self._entries)

    def get_entry(self, id: EntityId) -> Entry:
        return deepcopy(self.__find(id))

    def get_entries_for_day(self, day: pendulum.Date) -> list[Entry]:
        return deepcopy(
            sorted(
                [entry for entry in self._entries if entry["day"] == day],
                key=lambda entry: clock_to_minutes(entry["start"]),
            )
        )

    def get_week_view(
        self, dates: Iterable[pendulum.Date]
    ) -> list[tuple[pendulum.Date, list[Entry]]]:
        return [(date, self.get_entries_for_day(date)) for date in dates]
