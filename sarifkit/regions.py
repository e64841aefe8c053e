"""Regions, rectangles and replacements within artifacts."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from sarifkit.message import Message
from sarifkit.properties import PropertyBag, _field, _object


@dataclass
class Region(PropertyBag):
    """A contiguous portion of an artifact."""

    start_line: int | None = _field("startLine")
    start_column: int | None = _field("startColumn")
    end_line: int | None = _field("endLine")
    end_column: int | None = _field("endColumn")
    char_offset: int | None = _field("charOffset")
    char_length: int | None = _field("charLength")
    byte_offset: int | None = _field("byteOffset")
    byte_length: int | None = _field("byteLength")
    snippet: Any = _field("snippet")
    message: Message | None = _field("message", decode=_object(Message))
    source_language: str | None = _field("sourceLanguage")

    @classmethod
    def simple(cls, start_line: int, end_line: int) -> Region:
        """Create a region spanning the given lines."""
        return cls(start_line=start_line, end_line=end_line)

    def with_text_message(self, text: str) -> Region:
        """Set the message text, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.text = text
        return self

    def with_message_markdown(self, markdown: str) -> Region:
        """Set the message markdown, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.markdown = markdown
        return self


@dataclass
class Rectangle(PropertyBag):
    """A rectangular area within an image."""

    bottom: float | None = _field("bottom")
    left: float | None = _field("left")
    right: float | None = _field("right")
    top: float | None = _field("top")
    message: Message | None = _field("message", decode=_object(Message))

    def with_text_message(self, text: str) -> Rectangle:
        """Set the message text, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.text = text
        return self

    def with_message_markdown(self, markdown: str) -> Rectangle:
        """Set the message markdown, creating the message if needed."""
        if self.message is None:
            self.message = Message()
        self.message.markdown = markdown
        return self


@dataclass
class Replacement(PropertyBag):
    """Replacement of a region of an artifact with new content."""

    deleted_region: Region = _field(
        "deletedRegion",
        omitempty=False,
        decode=_object(Region),
        default_factory=Region,
    )
    inserted_content: Any = _field("insertedContent")

    def __post_init__(self) -> None:
        # The deleted region is held by value, independent of the caller's object.
        self.deleted_region = copy.copy(self.deleted_region)