import json

import pytest

from fatamorgana.message import Message, MessageStatus, MessageType, UserMessage


def test_to_json_is_compact_in_field_order():
    message = UserMessage(id=1, message_type="info", content="hi", created_at="x")
    assert message.to_json() == '{"id":1,"message_type":"info","content":"hi","created_at":"x"}'


def test_json_round_trip():
    message = UserMessage(id=42, message_type=MessageType.WARNING.value, content="你好", created_at="now")
    assert UserMessage.from_json(message.to_json()) == message


def test_to_json_keeps_non_ascii():
    assert "你好" in UserMessage(content="你好").to_json()


def test_from_json_missing_fields_take_zero_values():
    assert UserMessage.from_json('{"content": "only"}') == UserMessage(content="only")


def test_from_json_null_fields_take_zero_values():
    assert UserMessage.from_json('{"id": null, "content": "c"}') == UserMessage(content="c")


def test_from_json_accepts_bytes():
    raw = json.dumps({"id": 3, "message_type": "error"}).encode()
    assert UserMessage.from_json(raw) == UserMessage(id=3, message_type="error")


@pytest.mark.parametrize("text", ["not json", "[1, 2]", '{"id": "one"}', '{"content": 5}'])
def test_from_json_rejects_bad_input(text):
    with pytest.raises(ValueError):
        UserMessage.from_json(text)


def test_to_response_keeps_type_and_content():
    message = UserMessage(id=9, message_type="question", content="why", created_at="t")
    assert message.to_response() == {"message_type": "question", "content": "why"}


def test_message_defaults():
    message = Message(uid="u1", content="c", created_by="admin")
    assert message.status == MessageStatus.DRAFT
    assert message.message_type == MessageType.INFO
    assert message.read_at is None