"""User accounts, password hashing and bank card details."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

import bcrypt

_BCRYPT_ROUNDS = 10


class UserStatus(IntEnum):
    DISABLED = 0
    ACTIVE = 1
    PENDING = 2


@dataclass
class BankCardInfo:
    """Bank card attached to a user."""

    card_number: str
    card_type: str
    bank_name: str
    card_holder: str


@dataclass
class User:
    """A registered user. ``password`` holds the hash once hashed."""

    uid: str
    username: str
    email: str
    password: str
    id: int = 0
    phone: str = ""
    bank_card_info: str = ""
    experience: int = 0
    credit_score: int = 100
    status: int = UserStatus.PENDING
    invited_by: str = ""
    has_group_buy_qualification: bool = False
    rate: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def hash_password(self) -> None:
        """Replace the plain password with its bcrypt hash."""
        hashed = bcrypt.hashpw(self.password.encode(), bcrypt.gensalt(rounds=_BCRYPT_ROUNDS))
        self.password = hashed.decode()

    def check_password(self, password: str) -> bool:
        """Whether ``password`` matches the stored hash."""
        try:
            return bcrypt.checkpw(password.encode(), self.password.encode())
        except ValueError:
            return False

    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE