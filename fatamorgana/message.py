"""Messages pushed to users, stored in the database and cached as JSON."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class MessageStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    READ = "read"


class MessageType(str, Enum):
    WARNING = "warning"
    ERROR = "error"
    QUESTION = "question"
    INFO = "info"


@dataclass
class Message:
    """A message written by an admin for one user."""

    uid: str
    content: str
    created_by: str
    id: int = 0
    status: str = MessageStatus.DRAFT.value
    message_type: str = MessageType.INFO.value
    created_at: datetime | None = None
    updated_at: datetime | None = None
    read_at: datetime | None = None


def _field(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ValueError(f"field {key!r} has the wrong type")
    return value


@dataclass
class UserMessage:
    """The cached form of a message waiting to be shown to a user."""

    id: int = 0
    message_type: str = ""
    content: str = ""
    created_at: str = ""

    def to_json(self) -> str:
        """Compact JSON text of the message."""
        return json.dumps(asdict(self), ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str | bytes) -> UserMessage:
        """Parse cached JSON; missing fields take their zero values.

        Raises ValueError if the text is not a JSON object of the right shape.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("message JSON must be an object")
        return cls(
            id=_field(data, "id", int, 0),
            message_type=_field(data, "message_type", str, ""),
            content=_field(data, "content", str, ""),
            created_at=_field(data, "created_at", str, ""),
        )

    def to_response(self) -> dict[str, str]:
        return {"message_type": self.message_type, "content": self.content}