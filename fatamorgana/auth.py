"""Bearer token parsing, token error mapping and per-request auth state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from fatamorgana.pagination import RequestError

MISSING_TOKEN_MESSAGE = "缺少认证令牌"


def parse_bearer_token(header: str | None) -> str | None:
    """Token from an ``Authorization: Bearer <token>`` header.

    Returns None when there is no header; raises RequestError (401,
    INVALID_TOKEN_FORMAT) when the header is not exactly ``Bearer <token>``.
    """
    if not header:
        return None
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise RequestError(401, "认证令牌格式错误", "INVALID_TOKEN_FORMAT")
    return parts[1]


def classify_token_error(message: str) -> tuple[str, str]:
    """Client message and error code for a token validation failure."""
    if "已在其他设备登录" in message:
        return message, "TOKEN_REVOKED"
    if "已过期" in message:
        return "令牌已过期，请重新登录", "TOKEN_EXPIRED"
    if "无效的令牌" in message:
        return "无效的认证令牌", "INVALID_TOKEN"
    return "认证失败", "AUTH_FAILED"


@dataclass
class AuthContext:
    """Identity attached to a request; ``user_id`` is None when not logged in."""

    user_id: int | None = None
    uid: str = ""
    username: str = ""

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def login_status(self, now: datetime | None = None) -> dict[str, Any]:
        """Login state with a Unix timestamp, plus the user when logged in."""
        moment = now or datetime.now()
        status: dict[str, Any] = {
            "is_authenticated": self.is_authenticated,
            "timestamp": int(moment.timestamp()),
        }
        if self.is_authenticated:
            status["user_id"] = self.user_id
            status["username"] = self.username
        return status