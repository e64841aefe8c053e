"""Location-related SARIF objects: relationships, logical and physical locations, graph nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sarifkit.message import Message
from sarifkit.properties import PropertyBag, _field, _list_of, _object
from sarifkit.regions import Region


@dataclass
class LocationRelationship(PropertyBag):
    """A relationship from one location to another, identified by index."""

    target: int = _field("target", omitempty=False, default=0)
    kinds: list[str] | None = _field("kinds")
    description: Message | None = _field("description", decode=_object(Message))

    def add_kind(self, kind: str) -> None:
        """Append a relationship kind."""
        if self.kinds is None:
            self.kinds = []
        self.kinds.append(kind)

    def with_description_text(self, text: str) -> LocationRelationship:
        """Set the description text, creating the description if needed."""
        if self.description is None:
            self.description = Message()
        self.description.text = text
        return self

    def with_description_markdown(self, markdown: str) -> LocationRelationship:
        """Set the description markdown, creating the description if needed."""
        if self.description is None:
            self.description = Message()
        self.description.markdown = markdown
        return self


@dataclass
class LogicalLocation(PropertyBag):
    """A logical location such as a namespace, type or function."""

    index: int | None = _field("index")
    name: str | None = _field("name")
    fully_qualified_name: str | None = _field("fullyQualifiedName")
    decorated_name: str | None = _field("decoratedName")
    kind: str | None = _field("kind")
    parent_index: int | None = _field("parentIndex")


@dataclass
class PhysicalLocation(PropertyBag):
    """A physical location within an artifact or address space."""

    artifact_location: Any = _field("artifactLocation")
    region: Region | None = _field("region", decode=_object(Region))
    context_region: Region | None = _field("contextRegion", decode=_object(Region))
    address: Any = _field("address")


@dataclass
class Node(PropertyBag):
    """A node in a graph, possibly with child nodes."""

    children: list[Node] | None = _field(
        "children", decode=_list_of(lambda item: Node.from_dict(item)), kw_only=True
    )
    id: str = _field("id", omitempty=False, default="")
    label: Message | None = _field("label", decode=_object(Message))
    location: Any = _field("location")

    def add_child(self, child: Node) -> None:
        """Append a child node."""
        if self.children is None:
            self.children = []
        self.children.append(child)

    def with_label_text(self, text: str) -> Node:
        """Set the label text, creating the label if needed."""
        if self.label is None:
            self.label = Message()
        self.label.text = text
        return self

    def with_label_markdown(self, markdown: str) -> Node:
        """Set the label markdown, creating the label if needed."""
        if self.label is None:
            self.label = Message()
        self.label.markdown = markdown
        return self


@dataclass
class SpecialLocations(PropertyBag):
    """Locations with special significance to SARIF consumers."""

    display_base: Any = _field("displayBase")