from datetime import timedelta

import pytest

from fatamorgana.rate_limit import RateLimiter, account_key


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_allows_up_to_limit(clock):
    limiter = RateLimiter(2, 60, clock=clock)
    assert [limiter.allow("a") for _ in range(3)] == [True, True, False]


def test_keys_are_independent(clock):
    limiter = RateLimiter(1, 60, clock=clock)
    assert limiter.allow("a") is True
    assert limiter.allow("a") is False
    assert limiter.allow("b") is True


def test_window_slides(clock):
    limiter = RateLimiter(1, 60, clock=clock)
    assert limiter.allow("a") is True
    clock.now = 59.0
    assert limiter.allow("a") is False
    clock.now = 60.0
    assert limiter.allow("a") is True


def test_rejected_requests_are_not_counted(clock):
    limiter = RateLimiter(1, 10, clock=clock)
    assert limiter.allow("a") is True
    clock.now = 5.0
    assert limiter.allow("a") is False
    clock.now = 10.0
    assert limiter.allow("a") is True


def test_timedelta_window(clock):
    limiter = RateLimiter(1, timedelta(minutes=1), clock=clock)
    assert limiter.window == 60.0
    assert limiter.allow("k") is True
    assert limiter.allow("k") is False


def test_zero_limit_blocks_everything(clock):
    limiter = RateLimiter(0, 60, clock=clock)
    assert limiter.allow("a") is False


def test_account_key_prefers_account():
    assert account_key(b'{"account": "user@example.com"}', "10.0.0.1") == "user@example.com"
    assert account_key('{"account": "alice"}', "10.0.0.1") == "alice"


@pytest.mark.parametrize(
    "body",
    [None, b"", b"not json", b"[1, 2]", b'{"account": ""}', b'{"account": 5}', b'{"other": "x"}'],
)
def test_account_key_falls_back_to_ip(body):
    assert account_key(body, "10.0.0.1") == "10.0.0.1"