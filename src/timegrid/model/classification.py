# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

GroupKey = Literal["assignee", "reporter", "project"]

GROUP_KEYS: tuple[GroupKey, ...] = ("project", "assignee", "reporter")


class Classification(TypedDict):
    assignee: str
    reporter: str
    project: str
