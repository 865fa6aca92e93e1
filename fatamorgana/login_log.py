"""Records of user login attempts."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any


@dataclass
class UserLoginLog:
    """One login attempt; ``status`` is 1 for success and 0 for failure."""

    uid: str
    username: str
    email: str
    login_ip: str
    login_time: datetime
    id: int = 0
    user_agent: str = ""
    status: int = 1
    fail_reason: str = ""
    device_info: str = ""
    location: str = ""
    created_at: datetime | None = None

    def is_success(self) -> bool:
        return self.status == 1

    def to_response(self) -> dict[str, Any]:
        return asdict(self)