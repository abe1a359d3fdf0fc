# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from timegrid.model.classification import Classification
from timegrid.model.entity_id import EntityId
from timegrid.model.worklog import Worklog


class Entry(TypedDict):
    id: Optional[EntityId]  # None for drafts
    summary: str
    classification: Classification
    day: Optional[pendulum.Date]
    start: str  # HH:MM
    end: str  # HH:MM
    worklogs: list[Worklog]
    created: pendulum.DateTime
    updated: pendulum.DateTime


class EntryFields(TypedDict, total=False):
    """Editable fields submitted by a form."""

    summary: Optional[str]
    start: Optional[str]
    end: Optional[str]
    day: Optional[pendulum.Date]
    classification: Optional[Classification]
