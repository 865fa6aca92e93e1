from datetime import datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from fatamorgana.leaderboard import (
    LeaderboardEntry,
    LeaderboardResponse,
    current_week_range,
    mask_username,
    week_end,
    week_start,
)


@pytest.mark.parametrize("day", [1, 2, 3, 4, 5, 6])
def test_week_start_is_monday_midnight(day):
    # 2024-01-01 is a Monday
    moment = datetime(2024, 1, day, 15, 30, 12)
    start = week_start(moment)
    assert start.weekday() == 0
    assert start.hour == start.minute == start.second == start.microsecond == 0
    assert timedelta(0) <= moment - start < timedelta(days=7)


def test_week_start_on_sunday_goes_back_seven_days():
    sunday = datetime(2024, 1, 7, 9, 0)
    assert sunday.weekday() == 6
    start = week_start(sunday)
    assert start == datetime.combine((sunday - timedelta(days=7)).date(), datetime.min.time())
    assert start.weekday() == 6


def test_week_start_keeps_timezone():
    moment = datetime(2024, 1, 3, 8, 0, tzinfo=timezone.utc)
    assert week_start(moment).tzinfo is timezone.utc


def test_week_end():
    start = datetime(2024, 1, 1)
    end = week_end(start)
    assert end == datetime(2024, 1, 7, 23, 59, 59)


@freeze_time("2024-01-03 12:00:00")
def test_current_week_range_default_clock():
    start, end = current_week_range()
    assert start == datetime(2024, 1, 1)
    assert end == week_end(start)


def test_current_week_range_explicit():
    now = datetime(2024, 1, 5, 1, 2, 3)
    start, end = current_week_range(now)
    assert start <= now <= end


@pytest.mark.parametrize(
    "name, masked",
    [("", ""), ("a", "a"), ("ab", "a**b"), ("alice", "a**e"), ("张三丰", "张**丰")],
)
def test_mask_username(name, masked):
    assert mask_username(name) == masked


def test_response_defaults():
    now = datetime(2024, 1, 1)
    entry = LeaderboardEntry(id=1, uid="10000001", username=mask_username("bob"), completed_at=now)
    response = LeaderboardResponse(week_start=now, week_end=week_end(now), next_update=now)
    assert response.top_users == []
    assert response.my_rank is None
    assert entry.username == "b**b"
    assert entry.is_rank is False