"""Results: the individual findings reported by an analysis tool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from sarifkit.message import Message
from sarifkit.properties import PropertyBag, _field, _list_of, _object
from sarifkit.provenance import ResultProvenance
from sarifkit.rules import ReportingDescriptorReference
from sarifkit.stacks import Stack, Suppression
from sarifkit.web import WebRequest, WebResponse


@dataclass
class Result(PropertyBag):
    """A single finding produced by a run of a tool."""

    _PROPERTIES_FIRST: ClassVar[bool] = True

    guid: str | None = _field("guid")
    correlation_guid: str | None = _field("correlationGuid")
    rule_id: str | None = _field("ruleId")
    rule_index: int | None = _field("ruleIndex")
    rule: ReportingDescriptorReference | None = _field(
        "rule", decode=_object(ReportingDescriptorReference)
    )
    taxa: list[ReportingDescriptorReference] | None = _field(
        "taxa", decode=_list_of(_object(ReportingDescriptorReference))
    )
    kind: str | None = _field("kind")
    level: str | None = _field("level")
    message: Message = _field(
        "message", omitempty=False, decode=_object(Message), default_factory=Message
    )
    locations: list[Any] | None = _field("locations")
    analysis_target: Any = _field("analysisTarget")
    web_request: WebRequest | None = _field("webRequest", decode=_object(WebRequest))
    web_response: WebResponse | None = _field(
        "webResponse", decode=_object(WebResponse)
    )
    fingerprints: dict[str, Any] | None = _field("fingerprints", sort_keys=True)
    partial_fingerprints: dict[str, Any] | None = _field(
        "partialFingerprints", sort_keys=True
    )
    code_flows: list[Any] | None = _field("codeFlows")
    graphs: list[Any] | None = _field("graphs")
    graph_traversals: list[Any] | None = _field("graphTraversals")
    stacks: list[Stack] | None = _field("stacks", decode=_list_of(_object(Stack)))
    related_locations: list[Any] | None = _field("relatedLocations")
    suppressions: list[Suppression] | None = _field(
        "suppressions", decode=_list_of(_object(Suppression))
    )
    baseline_state: str | None = _field("baselineState")
    rank: float | None = _field("rank")
    attachments: list[Any] | None = _field("attachments")
    work_item_uris: list[str] | None = _field("workItemUris")
    hosted_viewer_uri: str | None = _field("hostedViewerUri")
    provenance: ResultProvenance | None = _field(
        "provenance", decode=_object(ResultProvenance)
    )
    fixes: list[Any] | None = _field("fixes")
    occurrence_count: int | None = _field("occurrenceCount")

    def add_taxa(self, taxa: ReportingDescriptorReference) -> None:
        """Append a reference to a taxon."""
        if self.taxa is None:
            self.taxa = []
        self.taxa.append(taxa)

    def add_location(self, location: Any) -> None:
        """Append a location."""
        if self.locations is None:
            self.locations = []
        self.locations.append(location)

    def set_fingerprint(self, name: str, value: Any) -> None:
        """Set the fingerprint ``name`` to ``value``."""
        if self.fingerprints is None:
            self.fingerprints = {}
        self.fingerprints[name] = value

    def set_partial_fingerprint(self, name: str, value: Any) -> None:
        """Set the partial fingerprint ``name`` to ``value``."""
        if self.partial_fingerprints is None:
            self.partial_fingerprints = {}
        self.partial_fingerprints[name] = value

    def add_code_flow(self, code_flow: Any) -> None:
        """Append a code flow."""
        if self.code_flows is None:
            self.code_flows = []
        self.code_flows.append(code_flow)

    def add_graph(self, graph: Any) -> None:
        """Append a graph."""
        if self.graphs is None:
            self.graphs = []
        self.graphs.append(graph)

    def add_graph_traversal(self, graph_traversal: Any) -> None:
        """Append a graph traversal."""
        if self.graph_traversals is None:
            self.graph_traversals = []
        self.graph_traversals.append(graph_traversal)

    def add_stack(self, stack: Stack) -> None:
        """Append a call stack."""
        if self.stacks is None:
            self.stacks = []
        self.stacks.append(stack)

    def add_related_location(self, location: Any) -> Result:
        """Append a related location and return this result."""
        if self.related_locations is None:
            self.related_locations = []
        self.related_locations.append(location)
        return self

    def add_suppression(self, suppression: Suppression) -> None:
        """Append a suppression."""
        if self.suppressions is None:
            self.suppressions = []
        self.suppressions.append(suppression)

    def add_attachment(self, attachment: Any) -> None:
        """Append an attachment."""
        if self.attachments is None:
            self.attachments = []
        self.attachments.append(attachment)

    def add_work_item_uri(self, work_item_uri: str) -> None:
        """Append a work item URI."""
        if self.work_item_uris is None:
            self.work_item_uris = []
        self.work_item_uris.append(work_item_uri)

    def add_fix(self, fix: Any) -> None:
        """Append a proposed fix."""
        if self.fixes is None:
            self.fixes = []
        self.fixes.append(fix)