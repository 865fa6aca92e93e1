"""Sliding-window request limiting keyed by account or client address."""

from __future__ import annotations

import json
import threading
import time
from datetime import timedelta
from typing import Callable

LOGIN_RATE_LIMIT = 5
LOGIN_RATE_WINDOW = timedelta(minutes=1)
REGISTER_RATE_LIMIT = 3
REGISTER_RATE_WINDOW = timedelta(hours=1)
WITHDRAW_RATE_LIMIT = 2
WITHDRAW_RATE_WINDOW = timedelta(hours=1)
GENERAL_RATE_LIMIT = 60
GENERAL_RATE_WINDOW = timedelta(minutes=1)

LOGIN_ACCOUNT_LIMIT = 10
ACCOUNT_LIMIT = 60
ACCOUNT_WINDOW = timedelta(minutes=1)

RATE_LIMIT_MESSAGE = "请求过于频繁，请稍后再试"


class RateLimiter:
    """Allows at most ``limit`` requests per key within a sliding ``window``.

    ``window`` is a timedelta or a number of seconds; ``clock`` returns the
    current time in seconds.
    """

    def __init__(
        self,
        limit: int,
        window: timedelta | float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window = window.total_seconds() if isinstance(window, timedelta) else float(window)
        self._clock = clock
        self._requests: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def allow(self, key: str) -> bool:
        """Record a request for ``key`` and report whether it is within the limit."""
        with self._lock:
            now = self._clock()
            window_start = now - self.window
            recent = [t for t in self._requests.get(key, ()) if t > window_start]
            if len(recent) >= self.limit:
                return False
            recent.append(now)
            self._requests[key] = recent
            return True


def account_key(body: bytes | str | None, client_ip: str) -> str:
    """Limiter key: the ``account`` field of a JSON body, else the client address."""
    if body:
        try:
            data = json.loads(body)
        except ValueError:
            data = None
        if isinstance(data, dict):
            account = data.get("account")
            if isinstance(account, str) and account:
                return account
    return client_ip