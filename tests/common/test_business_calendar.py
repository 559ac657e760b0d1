from datetime import date, datetime, timedelta

import pytest
import pytz

from src.nightbase.nightbase.common.business_calendar import BusinessCalendar, SwitchTime, parse_switch_time


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("05:00:00", SwitchTime(5, 0)),
        ("23:30", SwitchTime(23, 30)),
        ("7", SwitchTime(7, 0)),
        (None, SwitchTime(5, 0)),
        ("", SwitchTime(5, 0)),
    ],
)
def test_parse_switch_time(raw, expected):
    assert parse_switch_time(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "xx:00:00", "05:xx", "24:00:00", "05:60"])
def test_parse_switch_time_rejects_malformed(raw):
    assert parse_switch_time(raw) is None


def test_local_date_of_crosses_midnight_from_utc(calendar):
    # 15:30 UTC is 00:30 the next day in Tokyo
    instant = pytz.utc.localize(datetime(2024, 3, 14, 15, 30))

    assert calendar.local_date_of(instant) == date(2024, 3, 15)


def test_naive_datetime_is_taken_as_local(calendar):
    local = calendar.to_local(datetime(2024, 3, 15, 5, 0))

    assert local.hour == 5
    assert local.utcoffset().total_seconds() == 9 * 3600


def test_previous_business_date_handles_leap_day(calendar):
    assert calendar.previous_business_date(date(2024, 3, 1)) == date(2024, 2, 29)


def test_business_date_rolls_back_before_switch(calendar, jst):
    switch = SwitchTime(5, 0)

    assert calendar.business_date_of(jst(2024, 3, 15, 4, 59), switch) == date(2024, 3, 14)
    assert calendar.business_date_of(jst(2024, 3, 15, 5, 0), switch) == date(2024, 3, 15)
    assert calendar.business_date_of(jst(2024, 3, 15, 23, 0), switch) == date(2024, 3, 15)


def test_at_switch_time(calendar, jst):
    assert calendar.at_switch_time(date(2024, 3, 15), SwitchTime(5, 30)) == jst(2024, 3, 15, 5, 30)


def test_at_switch_time_inside_spring_forward_gap():
    # 02:30 does not exist in New York on 2024-03-10; clocks jump from 02:00 to 03:00.
    ny = BusinessCalendar("America/New_York")

    instant = ny.at_switch_time(date(2024, 3, 10), SwitchTime(2, 30))

    assert (instant.hour, instant.minute) == (3, 30)
    assert instant.utcoffset() == timedelta(hours=-4)
    assert instant.astimezone(pytz.utc) == datetime(2024, 3, 10, 7, 30, tzinfo=pytz.utc)
