import pendulum
import pytest

from timegrid.errors import RangeError
from timegrid.service.calendar import (
    date_range,
    filter_weekend,
    hour_labels,
    is_weekend,
    month_bounds,
    shift_weeks,
    slot_labels,
    week_label,
    week_of,
)


def test_week_of_wednesday(wednesday):
    """A Wednesday belongs to the week starting the Monday before it."""
    week = week_of(wednesday)
    assert week == [pendulum.date(2024, 1, day) for day in range(8, 15)]


def test_week_of_sunday_starts_six_days_earlier():
    week = week_of(pendulum.date(2024, 1, 14))
    assert week[0] == pendulum.date(2024, 1, 8)
    assert week[-1] == pendulum.date(2024, 1, 14)


def test_week_of_monday_starts_on_itself():
    assert week_of(pendulum.date(2024, 1, 8))[0] == pendulum.date(2024, 1, 8)


def test_week_of_crosses_month_boundary():
    week = week_of(pendulum.date(2024, 3, 1))
    assert week[0] == pendulum.date(2024, 2, 26)
    assert week[-1] == pendulum.date(2024, 3, 3)


def test_shift_weeks(wednesday):
    assert shift_weeks(wednesday, 1) == pendulum.date(2024, 1, 17)
    assert shift_weeks(wednesday, -2) == pendulum.date(2023, 12, 27)


def test_filter_weekend_keeps_order(wednesday):
    week = week_of(wednesday)
    assert filter_weekend(week, True) == week
    weekdays = filter_weekend(week, False)
    assert weekdays == week[:5]
    assert not any(is_weekend(date) for date in weekdays)


def test_date_range_inclusive():
    dates = date_range(pendulum.date(2024, 1, 12), pendulum.date(2024, 1, 15))
    assert dates == [
        pendulum.date(2024, 1, 12),
        pendulum.date(2024, 1, 13),
        pendulum.date(2024, 1, 14),
        pendulum.date(2024, 1, 15),
    ]


def test_date_range_without_weekends():
    dates = date_range(pendulum.date(2024, 1, 12), pendulum.date(2024, 1, 15), False)
    assert dates == [pendulum.date(2024, 1, 12), pendulum.date(2024, 1, 15)]


def test_date_range_single_day():
    day = pendulum.date(2024, 1, 12)
    assert date_range(day, day) == [day]


def test_date_range_rejects_reversed_range():
    with pytest.raises(RangeError):
        date_range(pendulum.date(2024, 1, 15), pendulum.date(2024, 1, 12))


def test_month_bounds_leap_year():
    assert month_bounds(pendulum.date(2024, 2, 10)) == (
        pendulum.date(2024, 2, 1),
        pendulum.date(2024, 2, 29),
    )


def test_grid_labels():
    assert hour_labels()[0] == "00:00"
    assert hour_labels()[-1] == "23:00"
    assert len(hour_labels()) == 24
    assert slot_labels(9) == ["09:00", "09:15", "09:30", "09:45"]
    assert slot_labels(9, 30) == ["09:00", "09:30"]


def test_week_label(wednesday):
    assert week_label(week_of(wednesday)) == "08 Jan – 14 Jan"
    assert week_label([]) == ""
