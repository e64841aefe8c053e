"""Call stacks, stack frames and suppressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sarifkit.message import Message
from sarifkit.properties import PropertyBag, _field, _list_of, _object


@dataclass
class StackFrame(PropertyBag):
    """A single frame of a call stack."""

    location: Any = _field("location")
    module: str | None = _field("module")
    parameters: list[str] | None = _field("parameters")
    thread_id: int | None = _field("threadId")

    def add_parameter(self, parameter: str) -> None:
        """Append a parameter value."""
        if self.parameters is None:
            self.parameters = []
        self.parameters.append(parameter)


@dataclass
class Stack(PropertyBag):
    """A call stack relevant to a result."""

    frames: list[StackFrame] | None = _field(
        "frames", omitempty=False, decode=_list_of(_object(StackFrame))
    )
    message: Message | None = _field("message", decode=_object(Message))

    def add_frame(self, frame: StackFrame) -> None:
        """Append a stack frame."""
        if self.frames is None:
            self.frames = []
        self.frames.append(frame)

    def with_text_message(self, text: str) -> Stack:
        """Set the message text, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.text = text
        return self

    def with_message_markdown(self, markdown: str) -> Stack:
        """Set the message markdown, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.markdown = markdown
        return self


@dataclass
class Suppression(PropertyBag):
    """A request to suppress a result."""

    kind: str = _field("kind", omitempty=False, default="")
    status: str | None = _field("status", omitempty=False)
    location: Any = _field("location", omitempty=False)
    guid: str | None = _field("guid", omitempty=False)
    justification: str | None = _field("justification", omitempty=False)