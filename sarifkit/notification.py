"""Notifications reported by a tool about its own execution."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sarifkit.message import Message
from sarifkit.properties import PropertyBag, _field, _object, _parse_time
from sarifkit.rules import ReportingDescriptorReference


@dataclass
class Notification(PropertyBag):
    """A condition encountered during tool execution."""

    associated_rule: ReportingDescriptorReference | None = _field(
        "associatedRule", decode=_object(ReportingDescriptorReference)
    )
    descriptor: ReportingDescriptorReference | None = _field(
        "descriptor", decode=_object(ReportingDescriptorReference)
    )
    exception: Any = _field("exception")
    level: str = _field("level", omitempty="zero", default="")
    locations: list[Any] | None = _field("locations")
    message: Message | None = _field(
        "message", omitempty=False, decode=_object(Message)
    )
    thread_id: int | None = _field("threadId")
    time_utc: datetime | None = _field("timeUtc", decode=_parse_time)

    def add_location(self, location: Any) -> None:
        """Append a location."""
        if self.locations is None:
            self.locations = []
        self.locations.append(location)

    def with_text_message(self, text: str) -> Notification:
        """Set the message text, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.text = text
        return self

    def with_message_markdown(self, markdown: str) -> Notification:
        """Set the message markdown, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.markdown = markdown
        return self