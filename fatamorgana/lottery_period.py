"""Lottery periods and the per-task price configuration shown alongside them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class LotteryPeriodStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    CLOSED = "closed"


_STATUS_NAMES = {
    LotteryPeriodStatus.PENDING: "待开始",
    LotteryPeriodStatus.ACTIVE: "进行中",
    LotteryPeriodStatus.CLOSED: "已结束",
}


@dataclass
class LotteryPeriod:
    """One ordering window with its number, totals and result."""

    period_number: str
    order_start_time: datetime
    order_end_time: datetime
    id: int = 0
    total_order_amount: float = 0.0
    status: str = LotteryPeriodStatus.PENDING.value
    lottery_result: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def _now(self, now: datetime | None) -> datetime:
        return now or datetime.now(self.order_end_time.tzinfo)

    def is_active(self, now: datetime | None = None) -> bool:
        now = self._now(now)
        return self.order_start_time < now < self.order_end_time

    def is_expired(self, now: datetime | None = None) -> bool:
        return self._now(now) > self.order_end_time

    def is_pending(self, now: datetime | None = None) -> bool:
        return self._now(now) < self.order_start_time

    def has_valid_time_range(self) -> bool:
        return self.order_start_time < self.order_end_time

    def time_range_error(self) -> str | None:
        """Message describing a bad time range, or None if it is valid."""
        if not self.has_valid_time_range():
            return "期数开始时间不能晚于结束时间"
        return None

    def current_status(self, now: datetime | None = None) -> str:
        """Status derived from the clock rather than the stored field."""
        now = self._now(now)
        if self.is_pending(now):
            return LotteryPeriodStatus.PENDING.value
        if self.is_active(now):
            return LotteryPeriodStatus.ACTIVE.value
        return LotteryPeriodStatus.CLOSED.value

    def status_name(self) -> str:
        """Display name of the stored status."""
        return _STATUS_NAMES.get(self.status, "")

    def to_order_response(self, now: datetime | None = None) -> dict[str, Any]:
        """Present the period in the shape of an order response."""
        now = self._now(now)
        expired = self.is_expired(now)
        remaining = 0 if expired else int((self.order_end_time - now).total_seconds())
        return {
            "id": self.id,
            "order_no": self.period_number,
            "uid": "",
            "period_number": "",
            "amount": self.total_order_amount,
            "profit_amount": 0.0,
            "status": self.current_status(now),
            "status_name": self.status_name(),
            "expire_time": self.order_end_time,
            "like_count": 0,
            "share_count": 0,
            "follow_count": 0,
            "favorite_count": 0,
            "like_status": "",
            "like_status_name": "",
            "share_status": "",
            "share_status_name": "",
            "follow_status": "",
            "follow_status_name": "",
            "favorite_status": "",
            "favorite_status_name": "",
            "auditor_uid": "",
            "is_system_order": False,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "is_expired": expired,
            "remaining_time": remaining,
        }


@dataclass
class PurchaseConfig:
    """Unit prices for each kind of task."""

    like_amount: float
    share_amount: float
    forward_amount: float
    favorite_amount: float
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class PeriodListEntry:
    """A period as listed to clients, with its task prices."""

    id: int
    period_number: str
    start_time: str
    end_time: str
    status: str
    is_expired: bool
    remaining_time: int
    like_amount: float
    share_amount: float
    forward_amount: float
    favorite_amount: float