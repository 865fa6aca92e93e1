"""Wallet transaction ledger entries and withdrawal summaries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class TransactionType(str, Enum):
    RECHARGE = "recharge"
    WITHDRAW = "withdraw"
    PURCHASE = "purchase"
    GROUP_BUY = "group_buy"
    PROFIT = "profit"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"


_TYPE_NAMES = {
    TransactionType.RECHARGE: "充值",
    TransactionType.WITHDRAW: "提现",
    TransactionType.PURCHASE: "购买订单",
    TransactionType.GROUP_BUY: "拼单",
    TransactionType.PROFIT: "利润",
}

_STATUS_NAMES = {
    TransactionStatus.PENDING: "待处理",
    TransactionStatus.SUCCESS: "成功",
    TransactionStatus.FAILED: "失败",
    TransactionStatus.CANCELLED: "已取消",
}

_CREDIT_TYPES = {TransactionType.RECHARGE, TransactionType.PROFIT}
_DEBIT_TYPES = {TransactionType.WITHDRAW, TransactionType.PURCHASE, TransactionType.GROUP_BUY}


@dataclass
class WalletTransaction:
    """One movement of money in or out of a wallet."""

    transaction_no: str
    uid: str
    type: str
    amount: float
    balance_before: float
    balance_after: float
    id: int = 0
    status: str = TransactionStatus.SUCCESS.value
    description: str = ""
    remark: str = ""
    related_order_no: str = ""
    operator_uid: str = ""
    ip_address: str = ""
    user_agent: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def type_name(self) -> str:
        return _TYPE_NAMES.get(self.type, "")

    def status_name(self) -> str:
        return _STATUS_NAMES.get(self.status, "")

    def is_success(self) -> bool:
        return self.status == TransactionStatus.SUCCESS

    def is_pending(self) -> bool:
        return self.status == TransactionStatus.PENDING

    def is_failed(self) -> bool:
        return self.status == TransactionStatus.FAILED

    def is_cancelled(self) -> bool:
        return self.status == TransactionStatus.CANCELLED

    def amount_display(self) -> str:
        """Amount to two decimals, signed '+' for credits and '-' for debits."""
        text = f"{self.amount:.2f}"
        if self.type in _CREDIT_TYPES:
            return "+" + text
        if self.type in _DEBIT_TYPES:
            return "-" + text
        return text

    def to_response(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "transaction_no": self.transaction_no,
            "uid": self.uid,
            "type": self.type,
            "type_name": self.type_name(),
            "amount": self.amount,
            "balance_before": self.balance_before,
            "balance_after": self.balance_after,
            "status": self.status,
            "status_name": self.status_name(),
            "description": self.description,
            "remark": self.remark,
            "related_order_no": self.related_order_no,
            "operator_uid": self.operator_uid,
            "ip_address": self.ip_address,
            "user_agent": self.user_agent,
            "created_at": self.created_at,
        }


@dataclass
class WithdrawSummary:
    """Totals of a user's withdrawals, broken down by status."""

    total_withdraw_amount: float = 0.0
    total_withdraw_count: int = 0
    pending_amount: float = 0.0
    pending_count: int = 0
    success_amount: float = 0.0
    success_count: int = 0
    failed_amount: float = 0.0
    failed_count: int = 0