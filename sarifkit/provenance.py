"""Provenance of results and version-control details of analysed code."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from sarifkit.locations import PhysicalLocation
from sarifkit.properties import PropertyBag, _field, _list_of, _object, _parse_time


@dataclass
class ResultProvenance(PropertyBag):
    """Information about how and when a result was detected."""

    _PROPERTIES_FIRST: ClassVar[bool] = True

    conversion_sources: list[PhysicalLocation] | None = _field(
        "conversionSources", decode=_list_of(_object(PhysicalLocation))
    )
    first_detection_run_guid: str | None = _field("firstDetectionRunGuid")
    first_detection_time_utc: datetime | None = _field(
        "firstDetectionTimeUtc", decode=_parse_time
    )
    invocation_index: int | None = _field("invocationIndex")
    last_detection_run_guid: str | None = _field("lastDetectionRunGuid")
    last_detection_time_utc: datetime | None = _field(
        "lastDetectionTimeUtc", decode=_parse_time
    )

    def add_conversion_source(self, conversion_source: PhysicalLocation) -> None:
        """Append a conversion source location."""
        if self.conversion_sources is None:
            self.conversion_sources = []
        self.conversion_sources.append(conversion_source)


@dataclass
class VersionControlDetails(PropertyBag):
    """The state of a version-control repository at analysis time."""

    as_of_time_utc: datetime | None = _field("asOfTimeUtc", decode=_parse_time)
    branch: str | None = _field("branch")
    mapped_to: Any = _field("mappedTo")
    repository_uri: str | None = _field("repositoryUri", omitempty=False)
    revision_id: str | None = _field("revisionId")
    revision_tag: str | None = _field("revisionTag")