from datetime import datetime, timezone

import pytest

from sarifkit.message import Message
from sarifkit.notification import Notification
from sarifkit.rules import ReportingDescriptorReference


def test_empty_notification_keeps_message_member():
    assert Notification().to_json() == '{"message":null}'


def test_with_text_message_creates_message():
    notification = Notification()
    assert notification.with_text_message("boom") is notification
    assert notification.message == Message(text="boom")


def test_markdown_keeps_existing_text():
    notification = Notification().with_text_message("plain").with_message_markdown("**md**")
    assert notification.message.text == "plain"
    assert notification.message.markdown == "**md**"


def test_level_omitted_when_empty():
    assert "level" not in Notification().to_dict()
    assert Notification(level="error").to_dict()["level"] == "error"


def test_add_location_appends():
    notification = Notification()
    notification.add_location({"id": 1})
    notification.add_location({"id": 2})
    assert notification.locations == [{"id": 1}, {"id": 2}]


def test_round_trip():
    notification = Notification(
        associated_rule=ReportingDescriptorReference(id="R1"),
        level="warning",
        thread_id=7,
        time_utc=datetime(2022, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    ).with_text_message("hello")
    restored = Notification.from_dict(notification.to_dict())
    assert restored == notification
    assert restored.associated_rule.id == "R1"


def test_time_is_parsed_from_json():
    restored = Notification.from_dict({"message": {"text": "t"}, "timeUtc": "2022-01-02T03:04:05Z"})
    assert restored.time_utc == datetime(2022, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert restored.message.text == "t"


def test_invalid_time_raises():
    with pytest.raises(ValueError):
        Notification.from_dict({"timeUtc": "not a time"})