"""Web requests and responses relevant to a result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sarifkit.properties import PropertyBag, _field


@dataclass
class WebRequest(PropertyBag):
    """An HTTP request."""

    body: Any = _field("body")
    headers: dict[str, str] | None = _field("headers", sort_keys=True)
    index: int | None = _field("index")
    method: str | None = _field("method")
    parameters: dict[str, str] | None = _field("parameters", sort_keys=True)
    protocol: str | None = _field("protocol")
    target: str | None = _field("target")
    version: str | None = _field("version")

    def set_header(self, name: str, value: str) -> None:
        """Set the header ``name`` to ``value``."""
        if self.headers is None:
            self.headers = {}
        self.headers[name] = value

    def set_parameter(self, name: str, value: str) -> None:
        """Set the request parameter ``name`` to ``value``."""
        if self.parameters is None:
            self.parameters = {}
        self.parameters[name] = value


@dataclass
class WebResponse(PropertyBag):
    """An HTTP response."""

    body: Any = _field("body")
    headers: dict[str, str] | None = _field("headers", sort_keys=True)
    index: int | None = _field("index")
    no_response_received: bool | None = _field("noResponseReceived")
    protocol: str | None = _field("protocol")
    reason_phrase: str | None = _field("reasonPhrase")
    status_code: int | None = _field("statusCode")
    version: str | None = _field("version")

    def set_header(self, name: str, value: str) -> None:
        """Set the header ``name`` to ``value``."""
        if self.headers is None:
            self.headers = {}
        self.headers[name] = value