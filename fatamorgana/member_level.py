"""User level configuration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class MemberLevel:
    """A user level with its cashback percentage and single amount."""

    level: int
    name: str
    id: int = 0
    logo: str = ""
    remark: str = ""
    cashback_ratio: float = 0.0
    single_amount: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def is_deleted(self) -> bool:
        """Whether the level has been soft-deleted."""
        return self.deleted_at is not None

    def to_response(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "level": self.level,
            "name": self.name,
            "logo": self.logo,
            "remark": self.remark,
            "cashback_ratio": self.cashback_ratio,
            "single_amount": self.single_amount,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }