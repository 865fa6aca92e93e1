"""Request pagination and user-id parameters."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class RequestError(Exception):
    """A request problem with an API ``code`` and a message for the client.

    ``error_code`` optionally carries a symbolic error name.
    """

    def __init__(self, code: int, message: str, error_code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.error_code = error_code


@dataclass
class Pagination:
    """Page selection for list queries."""

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    total: int = 0
    total_pages: int = 0

    def normalized(self) -> Pagination:
        """A copy with defaults for non-positive values and the page size capped."""
        page = self.page if self.page > 0 else DEFAULT_PAGE
        size = self.page_size if self.page_size > 0 else DEFAULT_PAGE_SIZE
        return replace(self, page=page, page_size=min(size, MAX_PAGE_SIZE))

    def offset(self) -> int:
        """Number of rows to skip before this page."""
        return (self.page - 1) * self.page_size


def coerce_user_id(value: Any) -> int:
    """Turn a stored user id into an int.

    None means no user is authenticated (code 401); other non-numeric values
    raise a 400 error. Floats are truncated.
    """
    if value is None:
        raise RequestError(401, "User not authenticated")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RequestError(400, "Invalid user ID type")
    return int(value)


def parse_user_id_param(text: str) -> int:
    """Parse a decimal 64-bit user id taken from a path parameter."""
    if not text:
        raise RequestError(400, "User ID is required")
    if not _INT_RE.fullmatch(text):
        raise RequestError(400, "Invalid user ID format")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise RequestError(400, "Invalid user ID format")
    return value