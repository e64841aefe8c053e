"""Automation details identifying a run within a series of runs."""

from __future__ import annotations

from dataclasses import dataclass

from sarifkit.message import Message
from sarifkit.properties import PropertyBag, _field, _object


@dataclass
class RunAutomationDetails(PropertyBag):
    """Identity and description of a run for automation purposes."""

    correlation_guid: str | None = _field("correlationGuid")
    description: Message | None = _field("description", decode=_object(Message))
    guid: str | None = _field("guid")
    id: str | None = _field("id")

    def with_description_text(self, text: str) -> RunAutomationDetails:
        """Set the description text, creating the description if needed."""
        if self.description is None:
            self.description = Message()
        self.description.text = text
        return self

    def with_description_markdown(self, markdown: str) -> RunAutomationDetails:
        """Set the description markdown, creating the description if needed."""
        if self.description is None:
            self.description = Message()
        self.description.markdown = markdown
        return self