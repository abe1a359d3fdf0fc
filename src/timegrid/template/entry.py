# SPDX-License-Identifier: MIT

from timegrid.model.classification import Classification
from timegrid.model.entry import Entry
from timegrid.time import now_utc


def get_classification_template() -> Classification:
    return {
        "assignee": "",
        "reporter": "",
        "project": "",
    }


def get_entry_template() -> Entry:
    now = now_utc()
    return {
        "id": None,
        "summary": "",
        "classification": get_classification_template(),
        "day": None,  # Must be set
        "start": "",
        "end": "",
        "worklogs": [],
        "created": now,
        "updated": now,
    }
