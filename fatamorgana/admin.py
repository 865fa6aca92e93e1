"""Admin accounts that own the invite codes used at registration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class AdminRole(IntEnum):
    """Role held by an admin account."""

    SUPER_ADMIN = 1
    MANAGER = 2
    SUPERVISOR = 3
    SALESMAN = 4


_ROLE_NAMES = {
    AdminRole.SUPER_ADMIN: "超级管理员",
    AdminRole.MANAGER: "经理",
    AdminRole.SUPERVISOR: "主管",
    AdminRole.SALESMAN: "业务员",
}


def validate_role_id(role_id: int) -> bool:
    """Whether ``role_id`` is a known role."""
    return role_id in _ROLE_NAMES


def role_id_by_name(role_name: str) -> AdminRole | None:
    """Role with the given display name, or None if no role has it."""
    return next((role for role, name in _ROLE_NAMES.items() if name == role_name), None)


@dataclass
class AdminUser:
    """An admin account; only its invite code matters to user registration."""

    admin_id: int
    username: str
    password: str
    id: int = 0
    remark: str = ""
    status: int = 1
    avatar: str = ""
    role: int = AdminRole.SALESMAN
    my_invite_code: str = ""
    parent_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def is_active(self) -> bool:
        return self.status == 1

    def role_name(self) -> str:
        """Display name of the role, or an empty string if unknown."""
        return _ROLE_NAMES.get(self.role, "")