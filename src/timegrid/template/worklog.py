# SPDX-License-Identifier: MIT

import pendulum

from timegrid.model.worklog import Worklog


def get_worklog_template(date: pendulum.Date) -> Worklog:
    return {
        "id": None,
        "date": date,
        "start": None,
        "duration_seconds": None,
        "comment": None,
    }
