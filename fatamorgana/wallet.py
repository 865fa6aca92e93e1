"""User wallets and their balance operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any


class WalletStatus(IntEnum):
    """State of a wallet."""

    FROZEN = 0
    NORMAL = 1
    NO_WITHDRAW = 2


_STATUS_NAMES = {
    WalletStatus.NORMAL: "正常",
    WalletStatus.FROZEN: "冻结",
    WalletStatus.NO_WITHDRAW: "无法提现",
}


class InsufficientBalanceError(ValueError):
    """Raised when a withdrawal exceeds the wallet balance."""

    def __init__(self, message: str = "余额不足") -> None:
        super().__init__(message)
        self.message = message


@dataclass
class Wallet:
    """A user's wallet with a single balance."""

    uid: str
    id: int = 0
    balance: float = 0.0
    status: int = WalletStatus.NORMAL
    currency: str = "PHP"
    last_active_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def available_balance(self) -> float:
        """Spendable balance; nothing is held back, so it equals the balance."""
        return self.balance

    def recharge(self, amount: float) -> None:
        """Add funds; a transfer in, not counted as income."""
        self.balance += amount

    def withdraw(self, amount: float) -> None:
        """Remove funds, raising InsufficientBalanceError if there are too few."""
        if self.balance < amount:
            raise InsufficientBalanceError()
        self.balance -= amount

    def is_active(self) -> bool:
        return self.status == WalletStatus.NORMAL

    def is_frozen(self) -> bool:
        return self.status == WalletStatus.FROZEN

    def is_no_withdraw(self) -> bool:
        return self.status == WalletStatus.NO_WITHDRAW

    def can_withdraw(self) -> bool:
        return self.status not in (WalletStatus.NO_WITHDRAW, WalletStatus.FROZEN)

    def can_operate(self) -> bool:
        """Whether recharges and purchases are allowed."""
        return self.status != WalletStatus.FROZEN

    def status_name(self) -> str:
        return _STATUS_NAMES.get(self.status, "")

    def touch(self, now: datetime | None = None) -> None:
        """Record activity at ``now`` (the current time by default)."""
        self.last_active_at = now or datetime.now()

    def to_response(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "uid": self.uid,
            "balance": self.balance,
            "status": int(self.status),
            "currency": self.currency,
            "last_active_at": self.last_active_at,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }