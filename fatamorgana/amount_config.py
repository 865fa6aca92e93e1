"""Preset amounts offered for recharges and withdrawals."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class AmountConfigType(str, Enum):
    RECHARGE = "recharge"
    WITHDRAW = "withdraw"


def _format_time(moment: datetime | None) -> str:
    if moment is None:
        return "0001-01-01 00:00:00"
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


@dataclass
class AmountConfig:
    """One preset amount for a given operation type."""

    type: str
    amount: float
    id: int = 0
    description: str = ""
    is_active: bool = True
    sort_order: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_response(self) -> dict[str, Any]:
        """Client view with timestamps as 'YYYY-MM-DD HH:MM:SS'."""
        return {
            "id": self.id,
            "type": self.type,
            "amount": self.amount,
            "description": self.description,
            "is_active": self.is_active,
            "sort_order": self.sort_order,
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }