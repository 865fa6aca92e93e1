from datetime import datetime

from fatamorgana.amount_config import AmountConfig, AmountConfigType


def test_to_response_formats_timestamps():
    config = AmountConfig(
        type=AmountConfigType.RECHARGE.value,
        amount=100.0,
        created_at=datetime(2024, 1, 2, 3, 4, 5),
        updated_at=datetime(2024, 1, 2, 3, 4, 5, 999),
    )
    response = config.to_response()
    assert response["created_at"] == "2024-01-02 03:04:05"
    assert response["updated_at"] == response["created_at"]


def test_to_response_copies_fields():
    config = AmountConfig(
        type=AmountConfigType.WITHDRAW.value,
        amount=250.5,
        id=3,
        description="fast",
        is_active=False,
        sort_order=9,
    )
    response = config.to_response()
    assert response["id"] == 3
    assert response["type"] == "withdraw"
    assert response["amount"] == 250.5
    assert response["description"] == "fast"
    assert response["is_active"] is False
    assert response["sort_order"] == 9


def test_missing_timestamps_render_as_zero_time():
    response = AmountConfig(type="recharge", amount=1.0).to_response()
    assert response["created_at"] == "0001-01-01 00:00:00"
    assert response["updated_at"] == response["created_at"]


def test_defaults():
    config = AmountConfig(type="recharge", amount=1.0)
    assert config.is_active is True
    assert config.sort_order == 0