"""Records of failed user operations with their request and response bodies."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class OperationType(str, Enum):
    LOGIN = "login"
    REGISTER = "register"
    ORDER_CREATE = "order_create"
    WALLET_WITHDRAW = "wallet_withdraw"
    WALLET_RECHARGE = "wallet_recharge"
    BANK_CARD_BIND = "bank_card_bind"
    GROUP_BUY_JOIN = "group_buy_join"
    SYSTEM_TASK = "system_task"


def coerce_json_bytes(value: Any) -> bytes | None:
    """Normalise a stored JSON column value to bytes.

    None stays None, bytes-like values are copied and text is UTF-8 encoded;
    anything else raises TypeError.
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode()
    raise TypeError(f"cannot read JSON data from {type(value).__name__}")


@dataclass
class OperationFailure:
    """A failed operation; ``uid`` is None when no user exists yet."""

    operation_type: str
    uid: str | None = None
    request_data: bytes | None = None
    response_data: bytes | None = None
    id: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        self.request_data = coerce_json_bytes(self.request_data)
        self.response_data = coerce_json_bytes(self.response_data)

    def to_response(self) -> dict[str, Any]:
        """Client view with the JSON bodies as text."""
        return {
            "id": self.id,
            "uid": self.uid,
            "operation_type": self.operation_type,
            "request_data": None if self.request_data is None else self.request_data.decode(),
            "response_data": None if self.response_data is None else self.response_data.decode(),
            "created_at": self.created_at,
        }