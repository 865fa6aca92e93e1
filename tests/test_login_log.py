from datetime import datetime

from fatamorgana.login_log import UserLoginLog


def make(**kwargs):
    return UserLoginLog(
        uid="12345678",
        username="alice",
        email="alice@example.com",
        login_ip="127.0.0.1",
        login_time=datetime(2024, 1, 2, 3, 4, 5),
        **kwargs,
    )


def test_default_is_success():
    assert make().is_success() is True


def test_failed_login():
    log = make(status=0, fail_reason="bad credentials")
    assert log.is_success() is False
    assert log.to_response()["fail_reason"] == "bad credentials"


def test_to_response_carries_every_field():
    log = make(user_agent="agent", device_info="desktop", location="here", id=3)
    response = log.to_response()
    assert response["id"] == 3
    assert response["uid"] == "12345678"
    assert response["login_ip"] == "127.0.0.1"
    assert response["login_time"] == datetime(2024, 1, 2, 3, 4, 5)
    assert response["user_agent"] == "agent"
    assert response["device_info"] == "desktop"
    assert response["location"] == "here"
    assert len(response) == 12