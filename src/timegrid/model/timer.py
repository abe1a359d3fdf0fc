# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

import pendulum

from timegrid.model.entity_id import EntityId


class TimerState(StrEnum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class TimerSession(TypedDict):
    task_id: EntityId
    date: pendulum.Date
    seconds: int
