from datetime import datetime

import pytest

from fatamorgana.operation_failure import OperationFailure, OperationType, coerce_json_bytes


def test_coerce_none():
    assert coerce_json_bytes(None) is None


@pytest.mark.parametrize("value", [b'{"a":1}', bytearray(b'{"a":1}'), memoryview(b'{"a":1}'), '{"a":1}'])
def test_coerce_bytes_like_and_text(value):
    assert coerce_json_bytes(value) == b'{"a":1}'


@pytest.mark.parametrize("value", [5, 1.5, ["x"], {"a": 1}])
def test_coerce_rejects_other_types(value):
    with pytest.raises(TypeError):
        coerce_json_bytes(value)


def test_post_init_coerces_text():
    failure = OperationFailure(operation_type=OperationType.LOGIN.value, request_data='{"account":"a"}')
    assert failure.request_data == b'{"account":"a"}'


def test_to_response_decodes_bodies():
    created = datetime(2024, 6, 1, 12, 0, 0)
    failure = OperationFailure(
        operation_type=OperationType.WALLET_WITHDRAW.value,
        uid="12345678",
        request_data=b'{"amount":10}',
        response_data='{"code":1}',
        id=4,
        created_at=created,
    )
    response = failure.to_response()
    assert response["request_data"] == '{"amount":10}'
    assert response["response_data"] == '{"code":1}'
    assert response["uid"] == "12345678"
    assert response["operation_type"] == "wallet_withdraw"
    assert response["id"] == 4
    assert response["created_at"] == created


def test_to_response_keeps_missing_bodies_as_none():
    response = OperationFailure(operation_type=OperationType.REGISTER.value).to_response()
    assert response["request_data"] is None
    assert response["response_data"] is None
    assert response["uid"] is None


def test_non_ascii_body_round_trips():
    failure = OperationFailure(operation_type="login", request_data='{"msg":"失败"}')
    assert failure.to_response()["request_data"] == '{"msg":"失败"}'