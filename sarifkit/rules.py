"""Rules, rule configuration and references to rules and tool components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from sarifkit.message import MultiformatMessageString
from sarifkit.properties import PropertyBag, _field, _map_of, _object


@dataclass
class ReportingConfiguration(PropertyBag):
    """Default or overriding configuration of a reporting descriptor."""

    enabled: bool | None = _field("enabled")
    level: str = _field("level", omitempty="zero", default="")
    parameters: PropertyBag | None = _field(
        "parameters", decode=_object(PropertyBag)
    )
    rank: float | None = _field("rank")


@dataclass
class ReportingDescriptor(PropertyBag):
    """A rule or notification that a tool can report."""

    id: str = _field("id", omitempty=False, default="")
    name: str | None = _field("name")
    short_description: MultiformatMessageString | None = _field(
        "shortDescription",
        omitempty=False,
        decode=_object(MultiformatMessageString),
    )
    full_description: MultiformatMessageString | None = _field(
        "fullDescription", decode=_object(MultiformatMessageString)
    )
    default_configuration: ReportingConfiguration | None = _field(
        "defaultConfiguration", decode=_object(ReportingConfiguration)
    )
    deprecated_ids: list[str] | None = _field("deprecatedIds")
    deprecated_guids: list[str] | None = _field("deprecatedGuids")
    deprecated_names: list[str] | None = _field("deprecatedNames")
    help_uri: str | None = _field("helpUri")
    help: MultiformatMessageString | None = _field(
        "help", decode=_object(MultiformatMessageString)
    )
    message_strings: dict[str, MultiformatMessageString] | None = _field(
        "messageStrings", decode=_map_of(_object(MultiformatMessageString))
    )

    def with_description(self, description: str) -> ReportingDescriptor:
        """Set the short description to a plain-text message."""
        self.short_description = MultiformatMessageString(text=description)
        return self

    def with_text_help(self, text: str) -> ReportingDescriptor:
        """Set the help text, creating the help message if needed."""
        if self.help is None:
            self.help = MultiformatMessageString()
        self.help.text = text
        return self

    def with_markdown_help(self, markdown: str) -> ReportingDescriptor:
        """Set the help markdown, creating the help message if needed."""
        if self.help is None:
            self.help = MultiformatMessageString()
        self.help.markdown = markdown
        return self


@dataclass
class ToolComponentReference(PropertyBag):
    """A reference to a tool component by name, index or GUID."""

    name: str | None = _field("name", omitempty=False)
    index: int | None = _field("index", omitempty=False)
    guid: str | None = _field("guid", omitempty=False)


@dataclass
class ReportingDescriptorReference(PropertyBag):
    """A reference to a reporting descriptor."""

    _PROPERTIES_FIRST: ClassVar[bool] = True

    id: str | None = _field("id")
    index: int | None = _field("index")
    guid: str | None = _field("guid")
    tool_component: ToolComponentReference | None = _field(
        "toolComponent", decode=_object(ToolComponentReference)
    )


@dataclass
class TranslationMetadata(PropertyBag):
    """Metadata describing a translation of a tool component."""

    download_uri: str | None = _field("downloadUri")
    full_description: MultiformatMessageString | None = _field(
        "fullDescription", decode=_object(MultiformatMessageString)
    )
    full_name: str | None = _field("fullName")
    information_uri: str | None = _field("informationUri")
    name: str | None = _field("name", omitempty=False)
    short_description: MultiformatMessageString | None = _field(
        "shortDescription", decode=_object(MultiformatMessageString)
    )

    def with_full_description_text(self, text: str) -> TranslationMetadata:
        """Set the full description text, creating it if needed."""
        if self.full_description is None:
            self.full_description = MultiformatMessageString()
        self.full_description.text = text
        return self

    def with_full_description_markdown(self, markdown: str) -> TranslationMetadata:
        """Set the full description markdown, creating it if needed."""
        if self.full_description is None:
            self.full_description = MultiformatMessageString()
        self.full_description.markdown = markdown
        return self

    def with_short_description_text(self, text: str) -> TranslationMetadata:
        """Set the short description text, creating it if needed."""
        if self.short_description is None:
            self.short_description = MultiformatMessageString()
        self.short_description.text = text
        return self

    def with_short_description_markdown(self, markdown: str) -> TranslationMetadata:
        """Set the short description markdown, creating it if needed."""
        if self.short_description is None:
            self.short_description = MultiformatMessageString()
        self.short_description.markdown = markdown
        return self