import pendulum
import pytest

from timegrid import configuration
from timegrid.model.entry import Entry
from timegrid.repository.entry import EntryRepository
from timegrid.template.entry import get_entry_template

FIXED_NOW = pendulum.datetime(2024, 1, 10, 12, 0, tz="UTC")


def make_entry(
    id: int,
    summary: str,
    day: pendulum.Date,
    start: str,
    end: str,
    assignee: str = "",
    reporter: str = "",
    project: str = "",
) -> Entry:
    entry = get_entry_template()
    entry["id"] = id
    entry["summary"] = summary
    entry["day"] = day
    entry["start"] = start
    entry["end"] = end
    entry["classification"] = {
        "assignee": assignee,
        "reporter": reporter,
        "project": project,
    }
    return entry


@pytest.fixture
def wednesday():
    return pendulum.date(2024, 1, 10)


@pytest.fixture
def repository():
    """An empty repository with a fixed clock."""
    return EntryRepository(clock=lambda: FIXED_NOW)


@pytest.fixture
def allow_config():
    config = configuration.get_default_configuration()
    config["move_collision"] = "allow"
    return config
