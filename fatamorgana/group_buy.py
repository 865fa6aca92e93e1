"""Group buys: shared orders paid for by several participants."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class GroupBuyStatus(str, Enum):
    NOT_STARTED = "not_started"
    PENDING = "pending"
    SUCCESS = "success"


class GroupBuyType(str, Enum):
    NORMAL = "normal"
    FLASH = "flash"
    VIP = "vip"


@dataclass
class GroupBuyDetail:
    """Client-facing view of a group buy."""

    has_data: bool
    group_buy_no: str
    group_buy_type: str
    total_amount: float
    current_participants: int
    target_participants: int
    paid_amount: float
    per_person_amount: float
    profit_margin: float
    remaining_amount: float
    deadline: datetime


@dataclass
class GroupBuy:
    """A group buy record."""

    group_buy_no: str
    creator_uid: str
    total_amount: float
    per_person_amount: float
    deadline: datetime
    id: int = 0
    order_no: str | None = None
    uid: str = ""
    current_participants: int = 1
    target_participants: int = 2
    group_buy_type: str = GroupBuyType.NORMAL.value
    paid_amount: float = 0.0
    profit_margin: float = 0.0
    status: str = GroupBuyStatus.NOT_STARTED.value
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_detail(self) -> GroupBuyDetail:
        """Detail view; the remaining amount never goes below zero."""
        return GroupBuyDetail(
            has_data=True,
            group_buy_no=self.group_buy_no,
            group_buy_type=self.group_buy_type,
            total_amount=self.total_amount,
            current_participants=self.current_participants,
            target_participants=self.target_participants,
            paid_amount=self.paid_amount,
            per_person_amount=self.per_person_amount,
            profit_margin=self.profit_margin,
            remaining_amount=max(self.total_amount - self.paid_amount, 0.0),
            deadline=self.deadline,
        )