"""SARIF reports: creation, loading and writing."""

from __future__ import annotations

import io
import json
import os
from dataclasses import dataclass
from enum import Enum
from typing import IO, Any, ClassVar

from sarifkit.properties import PropertyBag, _dumps, _field, _list_of, _object
from sarifkit.run import Run


class SarifError(Exception):
    """Raised when a report cannot be created or loaded."""


class Version(str, Enum):
    """SARIF format versions."""

    V2_1_0 = "2.1.0"
    V2_1_0_RTM5 = "2.1.0-rtm.5"  # deprecated; use V2_1_0


_SCHEMAS = {
    Version.V2_1_0.value: "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/main/sarif-2.1/schema/sarif-schema-2.1.0.json",
    Version.V2_1_0_RTM5.value: "https://docs.oasis-open.org/sarif/sarif/v2.1.0/errata01/os/schemas/sarif-schema-2.1.0.json",
}


def _version_value(version: Version | str) -> str:
    return version.value if isinstance(version, Version) else str(version)


@dataclass
class Report(PropertyBag):
    """A SARIF log: a format version, an optional schema and a list of runs."""

    _PROPERTIES_FIRST: ClassVar[bool] = True

    inline_external_properties: list[Any] | None = _field("inlineExternalProperties")
    version: str = _field("version", omitempty=False, default="")
    schema: str = _field("$schema", omitempty="zero", default="")
    runs: list[Run] | None = _field(
        "runs", omitempty=False, decode=_list_of(_object(Run)), default_factory=list
    )

    def add_run(self, run: Run) -> None:
        """Append a run to the report."""
        if self.runs is None:
            self.runs = []
        self.runs.append(run)

    @staticmethod
    def _emit(stream: IO[Any], text: str) -> None:
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            stream.write(text.encode("utf-8"))
        else:
            stream.write(text)

    def write(self, stream: IO[Any]) -> None:
        """Write compact JSON to ``stream`` after de-duplicating run artifacts."""
        for run in self.runs or []:
            run.dedupe_artifacts()
        self._emit(stream, _dumps(self.to_dict()))

    def pretty_write(self, stream: IO[Any]) -> None:
        """Write JSON indented by two spaces to ``stream``."""
        self._emit(stream, _dumps(self.to_dict(), indent=2))

    def write_file(self, filename: str | os.PathLike[str]) -> None:
        """Write the report, indented, to ``filename``."""
        with open(filename, "w", encoding="utf-8") as handle:
            self.pretty_write(handle)


def new_report(version: Version | str, include_schema: bool = True) -> Report:
    """Create an empty report; raise SarifError for an unknown version with schema."""
    value = _version_value(version)
    schema = ""
    if include_schema:
        try:
            schema = _SCHEMAS[value]
        except KeyError:
            raise SarifError(f"version [{value}] is not supported") from None
    return Report(version=value, schema=schema)


def from_bytes(content: bytes) -> Report:
    """Load a report from JSON bytes."""
    try:
        data = json.loads(content)
        return Report.from_dict(data)
    except (ValueError, TypeError) as exc:
        raise SarifError(str(exc)) from exc


def from_string(content: str) -> Report:
    """Load a report from a JSON string."""
    return from_bytes(content.encode("utf-8"))


def open_report(filename: str | os.PathLike[str]) -> Report:
    """Load a report from a file."""
    if not os.path.exists(filename):
        raise SarifError("the provided file path doesn't have a file")
    try:
        with open(filename, "rb") as handle:
            content = handle.read()
    except OSError as exc:
        raise SarifError(f"the provided filepath could not be opened. {exc}") from exc
    return from_bytes(content)