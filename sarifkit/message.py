"""Messages and multi-format message strings."""

from __future__ import annotations

from dataclasses import dataclass

from sarifkit.properties import PropertyBag, _field


@dataclass
class Message(PropertyBag):
    """A SARIF message: plain text, markdown, or a reference with arguments."""

    text: str | None = _field("text")
    markdown: str | None = _field("markdown")
    id: str | None = _field("id")
    arguments: list[str] | None = _field("arguments")

    def add_argument(self, argument: str) -> None:
        """Append a substitution argument."""
        if self.arguments is None:
            self.arguments = []
        self.arguments.append(argument)


@dataclass
class MultiformatMessageString(PropertyBag):
    """A message string available as plain text and optionally markdown."""

    text: str | None = _field("text")
    markdown: str | None = _field("markdown")


MessageStrings = dict[str, MultiformatMessageString]