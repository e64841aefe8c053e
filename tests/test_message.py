import pytest

from sarifkit.message import Message, MultiformatMessageString


def test_create_multi_format_message_string():
    msg = MultiformatMessageString("mock plain text")
    assert msg.to_json() == '{"text":"mock plain text"}'


def test_create_multi_format_message_string_with_markdown():
    msg = MultiformatMessageString("mock plain text", markdown="mock markdown text")
    assert msg.to_json() == '{"text":"mock plain text","markdown":"mock markdown text"}'


def test_multi_format_round_trip():
    msg = MultiformatMessageString("mock plain text", markdown="mock markdown text")
    assert MultiformatMessageString.from_dict(msg.to_dict()) == msg


def test_text_message():
    assert Message("mock plain text").to_dict() == {"text": "mock plain text"}


def test_markdown_message():
    assert Message(markdown="# markdown text").to_dict() == {"markdown": "# markdown text"}


def test_add_argument_builds_list_in_order():
    message = Message(id="default")
    message.add_argument("first")
    message.add_argument("second")
    assert message.arguments == ["first", "second"]
    assert message.to_dict() == {"id": "default", "arguments": ["first", "second"]}


def test_member_order_puts_properties_last():
    message = Message("mock plain text", markdown="mock markdown text", id="m1")
    message.add_string("string_key", "string_value")
    assert list(message.to_dict()) == ["text", "markdown", "id", "properties"]


def test_empty_message_serialises_to_empty_object():
    assert Message().to_json() == "{}"


def test_message_round_trip_with_properties():
    message = Message("mock plain text", arguments=["a", "b"])
    message.add_boolean("boolean_key", False)
    assert Message.from_dict(message.to_dict()) == message


def test_from_dict_ignores_unknown_members():
    message = Message.from_dict({"text": "mock plain text", "unknown": 1})
    assert message == Message("mock plain text")


def test_from_dict_rejects_non_object():
    with pytest.raises(TypeError):
        Message.from_dict("mock plain text")