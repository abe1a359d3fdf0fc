# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from timegrid.model.entity_id import EntityId


class Worklog(TypedDict):
    id: Optional[EntityId]
    date: pendulum.Date
    start: Optional[str]  # HH:MM
    duration_seconds: Optional[int]  # None until parsed
    comment: Optional[str]
