"""Tools and the components (drivers, extensions, taxonomies) they are made of."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sarifkit.message import MultiformatMessageString
from sarifkit.properties import (
    PropertyBag,
    _field,
    _list_of,
    _map_of,
    _object,
    _parse_time,
)
from sarifkit.rules import (
    ReportingDescriptor,
    ToolComponentReference,
    TranslationMetadata,
)


@dataclass
class ToolComponent(PropertyBag):
    """A component of a tool: its driver, an extension, a taxonomy or a policy."""

    associated_component: ToolComponentReference | None = _field(
        "associatedComponent", decode=_object(ToolComponentReference)
    )
    contents: list[Any] | None = _field("contents")
    dotted_quad_file_version: str | None = _field("dottedQuadFileVersion")
    download_uri: str | None = _field("downloadUri")
    full_description: MultiformatMessageString | None = _field(
        "fullDescription", decode=_object(MultiformatMessageString)
    )
    full_name: str | None = _field("fullName")
    global_message_strings: dict[str, MultiformatMessageString] | None = _field(
        "globalMessageStrings", decode=_map_of(_object(MultiformatMessageString))
    )
    guid: str | None = _field("guid")
    information_uri: str | None = _field("informationUri")
    is_comprehensive: bool | None = _field("isComprehensive")
    language: str | None = _field("language")
    localized_data_semantic_version: str | None = _field(
        "localizedDataSemanticVersion"
    )
    locations: list[Any] | None = _field("locations")
    minimum_required_localized_data_semantic_version: str | None = _field(
        "minimumRequiredLocalizedDataSemanticVersion"
    )
    name: str = _field("name", omitempty=False, default="")
    notifications: list[ReportingDescriptor] | None = _field(
        "notifications", decode=_list_of(_object(ReportingDescriptor))
    )
    organization: str | None = _field("organization")
    product: str | None = _field("product")
    product_suite: str | None = _field("productSuite")
    release_date_utc: datetime | None = _field(
        "releaseDateUtc", decode=_parse_time
    )
    rules: list[ReportingDescriptor] | None = _field(
        "rules",
        omitempty=False,
        decode=_list_of(_object(ReportingDescriptor)),
        default_factory=list,
    )
    semantic_version: str | None = _field("semanticVersion")
    short_description: MultiformatMessageString | None = _field(
        "shortDescription", decode=_object(MultiformatMessageString)
    )
    supported_taxonomies: list[ToolComponentReference] | None = _field(
        "supportedTaxonomies", decode=_list_of(_object(ToolComponentReference))
    )
    taxa: list[ReportingDescriptor] | None = _field(
        "taxa", decode=_list_of(_object(ReportingDescriptor))
    )
    translation_metadata: TranslationMetadata | None = _field(
        "translationMetadata", decode=_object(TranslationMetadata)
    )
    version: str | None = _field("version")

    def add_rule(self, rule: ReportingDescriptor) -> int:
        """Add a rule unless one with the same id exists; return its index."""
        if self.rules is None:
            self.rules = []
        for index, existing in enumerate(self.rules):
            if existing.id == rule.id:
                return index
        self.rules.append(rule)
        return len(self.rules) - 1

    def add_rules(self, rules: list[ReportingDescriptor]) -> ToolComponent:
        """Add each rule whose id is not yet present."""
        for rule in rules:
            self.add_rule(rule)
        return self

    def rule_index(self, rule_id: str) -> int | None:
        """Return the index of the rule with ``rule_id``, or None if absent."""
        return next(
            (index for index, rule in enumerate(self.rules or []) if rule.id == rule_id),
            None,
        )

    def add_notification(self, notification: ReportingDescriptor) -> None:
        """Append a notification descriptor."""
        if self.notifications is None:
            self.notifications = []
        self.notifications.append(notification)

    def add_taxa(self, taxa: ReportingDescriptor) -> None:
        """Append a taxon."""
        if self.taxa is None:
            self.taxa = []
        self.taxa.append(taxa)

    def add_content(self, content: Any) -> None:
        """Append a content kind."""
        if self.contents is None:
            self.contents = []
        self.contents.append(content)

    def add_location(self, location: Any) -> None:
        """Append an artifact location."""
        if self.locations is None:
            self.locations = []
        self.locations.append(location)

    def add_supported_taxonomy(self, taxonomy: ToolComponentReference) -> None:
        """Append a reference to a supported taxonomy."""
        if self.supported_taxonomies is None:
            self.supported_taxonomies = []
        self.supported_taxonomies.append(taxonomy)


@dataclass
class Tool(PropertyBag):
    """The analysis tool: a driver and optional extensions."""

    driver: ToolComponent | None = _field(
        "driver", omitempty=False, decode=_object(ToolComponent)
    )
    extensions: list[ToolComponent] | None = _field(
        "extensions", decode=_list_of(_object(ToolComponent))
    )

    @classmethod
    def simple(cls, driver_name: str) -> Tool:
        """Create a tool whose driver has the given name."""
        return cls(driver=ToolComponent(name=driver_name))

    def add_extension(self, extension: ToolComponent) -> None:
        """Append an extension component."""
        if self.extensions is None:
            self.extensions = []
        self.extensions.append(extension)