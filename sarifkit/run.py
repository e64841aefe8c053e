"""Runs: a single invocation of an analysis tool and what it found."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sarifkit.automation import RunAutomationDetails
from sarifkit.locations import LogicalLocation, SpecialLocations
from sarifkit.properties import PropertyBag, _field, _list_of, _object
from sarifkit.provenance import VersionControlDetails
from sarifkit.result import Result
from sarifkit.rules import ReportingDescriptor
from sarifkit.thread_flows import ThreadFlowLocation
from sarifkit.tool import Tool, ToolComponent
from sarifkit.web import WebRequest, WebResponse


@dataclass
class Run(PropertyBag):
    """One run of a tool: the tool description, its results and supporting data."""

    tool: Tool = _field(
        "tool", omitempty=False, decode=_object(Tool), default_factory=Tool
    )
    artifacts: list[Any] | None = _field("artifacts")
    invocations: list[Any] | None = _field("invocations")
    logical_locations: list[LogicalLocation] | None = _field(
        "logicalLocations", decode=_list_of(_object(LogicalLocation))
    )
    results: list[Result] | None = _field(
        "results",
        omitempty=False,
        decode=_list_of(_object(Result)),
        default_factory=list,
    )
    addresses: list[Any] | None = _field("addresses")
    automation_details: RunAutomationDetails | None = _field(
        "automationDetails", decode=_object(RunAutomationDetails)
    )
    baseline_guid: str | None = _field("baselineGuid")
    column_kind: Any = _field("columnKind")
    conversion: Any = _field("conversion")
    default_encoding: str | None = _field("defaultEncoding")
    default_source_language: str | None = _field("defaultSourceLanguage")
    external_property_file_references: Any = _field("externalPropertyFileReferences")
    graphs: list[Any] | None = _field("graphs")
    language: str | None = _field("language")
    newline_sequences: list[str] | None = _field("newlineSequences")
    original_uri_base_ids: dict[str, Any] | None = _field(
        "originalUriBaseIds", sort_keys=True
    )
    policies: list[ToolComponent] | None = _field(
        "policies", decode=_list_of(_object(ToolComponent))
    )
    redaction_tokens: list[str] | None = _field("redactionTokens")
    run_aggregates: list[RunAutomationDetails] | None = _field(
        "runAggregates", decode=_list_of(_object(RunAutomationDetails))
    )
    special_locations: SpecialLocations | None = _field(
        "specialLocations", decode=_object(SpecialLocations)
    )
    taxonomies: list[ToolComponent] | None = _field(
        "taxonomies", decode=_list_of(_object(ToolComponent))
    )
    thread_flow_locations: list[ThreadFlowLocation] | None = _field(
        "threadFlowLocations", decode=_list_of(_object(ThreadFlowLocation))
    )
    translations: list[ToolComponent] | None = _field(
        "translations", decode=_list_of(_object(ToolComponent))
    )
    version_control_provenance: list[VersionControlDetails] | None = _field(
        "versionControlProvenance", decode=_list_of(_object(VersionControlDetails))
    )
    web_requests: list[WebRequest] | None = _field(
        "webRequests", decode=_list_of(_object(WebRequest))
    )
    web_responses: list[WebResponse] | None = _field(
        "webResponses", decode=_list_of(_object(WebResponse))
    )

    @classmethod
    def with_information_uri(cls, tool_name: str, information_uri: str) -> Run:
        """Create a run for a tool with the given name and information URI."""
        driver = ToolComponent(name=tool_name, information_uri=information_uri)
        return cls(tool=Tool(driver=driver))

    def _append(self, attribute: str, item: Any) -> None:
        items = getattr(self, attribute)
        if items is None:
            items = []
            setattr(self, attribute, items)
        items.append(item)

    def add_result(self, result: Result) -> None:
        """Append a result, setting its rule index from the driver's rules."""
        driver = self.tool.driver
        result.rule_index = (
            driver.rule_index(result.rule_id) if driver is not None else None
        )
        self._append("results", result)

    def add_results(self, results: list[Result]) -> Run:
        """Append each result in turn and return this run."""
        for result in results:
            self.add_result(result)
        return self

    def add_graph(self, graph: Any) -> None:
        """Append a graph."""
        self._append("graphs", graph)

    def add_invocation(self, invocation: Any) -> None:
        """Append an invocation."""
        self._append("invocations", invocation)

    def add_logical_location(self, logical_location: LogicalLocation) -> None:
        """Append a logical location."""
        self._append("logical_locations", logical_location)

    def add_policy(self, policy: ToolComponent) -> None:
        """Append a policy component."""
        self._append("policies", policy)

    def add_run_aggregate(self, run_aggregate: RunAutomationDetails) -> None:
        """Append a run aggregate."""
        self._append("run_aggregates", run_aggregate)

    def add_taxonomy(self, taxonomy: ToolComponent) -> None:
        """Append a taxonomy component."""
        self._append("taxonomies", taxonomy)

    def add_thread_flow_location(self, thread_flow_location: ThreadFlowLocation) -> None:
        """Append a shared thread flow location."""
        self._append("thread_flow_locations", thread_flow_location)

    def add_translation(self, translation: ToolComponent) -> None:
        """Append a translation component."""
        self._append("translations", translation)

    def add_version_control_provenance(
        self, vc_provenance: VersionControlDetails
    ) -> None:
        """Append version-control details."""
        self._append("version_control_provenance", vc_provenance)

    def add_web_request(self, web_request: WebRequest) -> None:
        """Append a web request."""
        self._append("web_requests", web_request)

    def add_web_response(self, web_response: WebResponse) -> None:
        """Append a web response."""
        self._append("web_responses", web_response)

    def add_rule(self, rule_id: str) -> ReportingDescriptor:
        """Return the driver's rule with ``rule_id``, creating it if absent."""
        driver = self.tool.driver
        if driver is None:
            raise ValueError("the run's tool has no driver")
        for rule in driver.rules or []:
            if rule.id == rule_id:
                return rule
        rule = ReportingDescriptor(id=rule_id)
        driver.add_rule(rule)
        return rule

    def create_result_for_rule(self, rule_id: str) -> Result:
        """Create a result for ``rule_id``, add it to the run and return it."""
        result = Result(rule_id=rule_id)
        self.add_result(result)
        return result

    def get_rule_by_id(self, rule_id: str) -> ReportingDescriptor:
        """Return the driver's rule with ``rule_id``; raise LookupError if absent."""
        driver = self.tool.driver
        if driver is not None:
            for rule in driver.rules or []:
                if rule.id == rule_id:
                    return rule
        raise LookupError(f"couldn't find rule {rule_id}")

    def get_result_by_rule_id(self, rule_id: str) -> Result:
        """Return the first result for ``rule_id``; raise LookupError if absent."""
        for result in self.results or []:
            if result.rule_id == rule_id:
                return result
        raise LookupError(f"couldn't find a result for rule {rule_id}")

    def dedupe_artifacts(self) -> None:
        """Drop repeated references to the same artifact object, keeping order."""
        if self.artifacts is None:
            return
        seen: set[int] = set()
        deduped = []
        for artifact in self.artifacts:
            if id(artifact) not in seen:
                seen.add(id(artifact))
                deduped.append(artifact)
        self.artifacts = deduped