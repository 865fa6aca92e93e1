"""Weekly task leaderboard entries and week arithmetic."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta


@dataclass
class LeaderboardEntry:
    """One user's line on the weekly board."""

    id: int
    uid: str
    username: str
    completed_at: datetime
    order_count: int = 0
    total_amount: float = 0.0
    total_profit: float = 0.0
    rank: int = 0
    is_rank: bool = False


@dataclass
class LeaderboardResponse:
    """The board for one week plus the caller's own position."""

    week_start: datetime
    week_end: datetime
    next_update: datetime
    my_rank: LeaderboardEntry | None = None
    top_users: list[LeaderboardEntry] = field(default_factory=list)


def week_start(moment: datetime) -> datetime:
    """Midnight at the start of the week containing ``moment``.

    Monday through Saturday step back to Monday; a Sunday steps back a full
    seven days, landing on the previous Sunday.
    """
    weekday = moment.weekday()
    days_back = 7 if weekday == 6 else weekday
    day = (moment - timedelta(days=days_back)).date()
    return datetime.combine(day, time(), tzinfo=moment.tzinfo)


def week_end(start: datetime) -> datetime:
    """Last second of the week that begins at ``start``."""
    return start + timedelta(days=6, hours=23, minutes=59, seconds=59)


def current_week_range(now: datetime | None = None) -> tuple[datetime, datetime]:
    start = week_start(now or datetime.now())
    return start, week_end(start)


def mask_username(username: str) -> str:
    """Keep the first and last character and replace the middle with '**'."""
    if len(username) <= 1:
        return username
    return f"{username[0]}**{username[-1]}"