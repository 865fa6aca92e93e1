"""Orders, their task sub-statuses and order list pagination."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any


class OrderStatus(str, Enum):
    """Lifecycle state of an order."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class TaskStatus(str, Enum):
    """Completion state of a single order task (like, share, follow, favorite)."""

    PENDING = "pending"
    SUCCESS = "success"
    CANCELLED = "cancelled"


class OrderStatusType(IntEnum):
    """Filter selector used by order list requests."""

    IN_PROGRESS = 1
    COMPLETED = 2
    ALL = 3


_ORDER_STATUS_NAMES = {
    OrderStatus.PENDING: "待处理",
    OrderStatus.SUCCESS: "成功",
    OrderStatus.FAILED: "失败",
    OrderStatus.CANCELLED: "已取消",
    OrderStatus.EXPIRED: "已过期",
}

_TASK_STATUS_NAMES = {
    TaskStatus.PENDING: "待完成",
    TaskStatus.SUCCESS: "已完成",
    TaskStatus.CANCELLED: "已关闭",
}

_STATUS_TYPE_NAMES = {
    OrderStatusType.IN_PROGRESS: "进行中",
    OrderStatusType.COMPLETED: "已完成",
    OrderStatusType.ALL: "全部",
}


class OrderValidationError(ValueError):
    """Raised when an order's amounts or task counts are not acceptable."""

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


@dataclass
class PaginationInfo:
    """Pagination block attached to list responses."""

    current_page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


def _now_like(reference: datetime) -> datetime:
    return datetime.now(reference.tzinfo)


def task_status_name(status: str) -> str:
    """Display name of a task status, or an empty string if unknown."""
    return _TASK_STATUS_NAMES.get(status, "")


def status_for_type(status_type: int) -> str:
    """Order status matching a list filter; empty means every status."""
    if status_type == OrderStatusType.IN_PROGRESS:
        return OrderStatus.PENDING.value
    if status_type == OrderStatusType.COMPLETED:
        return OrderStatus.SUCCESS.value
    return ""


def status_type_name(status_type: int) -> str:
    """Display name of a list filter."""
    return _STATUS_TYPE_NAMES.get(status_type, "未知")


@dataclass
class Order:
    """A task order placed by a user for a lottery period."""

    order_no: str
    uid: str
    period_number: str
    amount: float
    profit_amount: float
    expire_time: datetime
    id: int = 0
    status: str = OrderStatus.PENDING.value
    like_count: int = 0
    share_count: int = 0
    follow_count: int = 0
    favorite_count: int = 0
    like_status: str = TaskStatus.PENDING.value
    share_status: str = TaskStatus.PENDING.value
    follow_status: str = TaskStatus.PENDING.value
    favorite_status: str = TaskStatus.PENDING.value
    auditor_uid: str = ""
    is_system_order: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def status_name(self) -> str:
        return _ORDER_STATUS_NAMES.get(self.status, "")

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or _now_like(self.expire_time)
        return now > self.expire_time

    def remaining_seconds(self, now: datetime | None = None) -> int:
        now = now or _now_like(self.expire_time)
        if self.is_expired(now):
            return 0
        return int((self.expire_time - now).total_seconds())

    def _task_pairs(self) -> tuple[tuple[int, str], ...]:
        return (
            (self.like_count, self.like_status),
            (self.share_count, self.share_status),
            (self.follow_count, self.follow_status),
            (self.favorite_count, self.favorite_status),
        )

    def all_tasks_completed(self) -> bool:
        return all(status == TaskStatus.SUCCESS for _, status in self._task_pairs())

    def all_tasks_zero(self) -> bool:
        return all(count == 0 for count, _ in self._task_pairs())

    def has_any_task(self) -> bool:
        return any(count > 0 for count, _ in self._task_pairs())

    def initialize_task_statuses(self) -> None:
        """Mark tasks with a zero count as done and the rest as pending."""

        def initial(count: int) -> str:
            return (TaskStatus.SUCCESS if count == 0 else TaskStatus.PENDING).value

        self.like_status = initial(self.like_count)
        self.share_status = initial(self.share_count)
        self.follow_status = initial(self.follow_count)
        self.favorite_status = initial(self.favorite_count)

    def validate(self) -> None:
        """Raise OrderValidationError if the order data is not acceptable."""
        if self.amount <= 0:
            raise OrderValidationError("order_amount_invalid", "订单金额必须大于0")
        if self.profit_amount < 0:
            raise OrderValidationError("profit_amount_invalid", "利润金额不能为负数")
        if self.all_tasks_zero():
            raise OrderValidationError("task_count_invalid", "至少需要有一个任务数量大于0")
        if any(count < 0 for count, _ in self._task_pairs()):
            raise OrderValidationError("task_count_negative", "任务数量不能为负数")

    def to_response(self, now: datetime | None = None) -> dict[str, Any]:
        now = now or _now_like(self.expire_time)
        return {
            "id": self.id,
            "order_no": self.order_no,
            "uid": self.uid,
            "period_number": self.period_number,
            "amount": self.amount,
            "profit_amount": self.profit_amount,
            "status": self.status,
            "status_name": self.status_name(),
            "expire_time": self.expire_time,
            "like_count": self.like_count,
            "share_count": self.share_count,
            "follow_count": self.follow_count,
            "favorite_count": self.favorite_count,
            "like_status": self.like_status,
            "like_status_name": task_status_name(self.like_status),
            "share_status": self.share_status,
            "share_status_name": task_status_name(self.share_status),
            "follow_status": self.follow_status,
            "follow_status_name": task_status_name(self.follow_status),
            "favorite_status": self.favorite_status,
            "favorite_status_name": task_status_name(self.favorite_status),
            "auditor_uid": self.auditor_uid,
            "is_system_order": self.is_system_order,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "is_expired": self.is_expired(now),
            "remaining_time": self.remaining_seconds(now),
        }