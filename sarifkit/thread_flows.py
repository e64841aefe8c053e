"""Thread flows and the locations visited along them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sarifkit.message import Message, MultiformatMessageString
from sarifkit.properties import (
    PropertyBag,
    _field,
    _list_of,
    _map_of,
    _object,
    _parse_time,
)
from sarifkit.rules import ReportingDescriptorReference
from sarifkit.stacks import Stack
from sarifkit.web import WebRequest, WebResponse


@dataclass
class ThreadFlowLocation(PropertyBag):
    """A location visited by a thread of execution."""

    execution_order: int | None = _field("executionOrder")
    execution_time_utc: datetime | None = _field(
        "executionTimeUtc", decode=_parse_time
    )
    importance: Any = _field("importance")
    index: int | None = _field("index")
    kinds: list[str] | None = _field("kinds")
    location: Any = _field("location")
    module: str | None = _field("module")
    nesting_level: int | None = _field("nestingLevel")
    stack: Stack | None = _field("stack", decode=_object(Stack))
    state: dict[str, MultiformatMessageString] | None = _field(
        "state", decode=_map_of(_object(MultiformatMessageString)), sort_keys=True
    )
    taxa: list[ReportingDescriptorReference] | None = _field(
        "taxa", decode=_list_of(_object(ReportingDescriptorReference))
    )
    web_request: WebRequest | None = _field("webRequest", decode=_object(WebRequest))
    web_response: WebResponse | None = _field(
        "webResponse", decode=_object(WebResponse)
    )

    def add_kind(self, kind: str) -> None:
        """Append a location kind."""
        if self.kinds is None:
            self.kinds = []
        self.kinds.append(kind)

    def add_taxa(self, taxa: ReportingDescriptorReference) -> None:
        """Append a reference to a taxon."""
        if self.taxa is None:
            self.taxa = []
        self.taxa.append(taxa)


@dataclass
class ThreadFlow(PropertyBag):
    """A sequence of locations visited by one thread of execution."""

    id: str | None = _field("id")
    immutable_state: dict[str, MultiformatMessageString] | None = _field(
        "immutableState",
        decode=_map_of(_object(MultiformatMessageString)),
        sort_keys=True,
    )
    initial_state: dict[str, MultiformatMessageString] | None = _field(
        "initialState",
        decode=_map_of(_object(MultiformatMessageString)),
        sort_keys=True,
    )
    locations: list[ThreadFlowLocation] | None = _field(
        "locations", omitempty=False, decode=_list_of(_object(ThreadFlowLocation))
    )
    message: Message | None = _field("message", decode=_object(Message))

    def add_location(self, location: ThreadFlowLocation) -> None:
        """Append a thread flow location."""
        if self.locations is None:
            self.locations = []
        self.locations.append(location)

    def with_text_message(self, text: str) -> ThreadFlow:
        """Set the message text, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.text = text
        return self

    def with_message_markdown(self, markdown: str) -> ThreadFlow:
        """Set the message markdown, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.markdown = markdown
        return self