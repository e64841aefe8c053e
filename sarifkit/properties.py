"""Property bags and the JSON mapping shared by the SARIF object model."""

from __future__ import annotations

import dataclasses
import json
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, ClassVar

_SPEC_KEY = "sarif"

_HTML_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_FRACTION = re.compile(r"\.(\d+)")


@dataclass(frozen=True)
class _JsonSpec:
    """How one dataclass field maps onto a JSON member."""

    name: str
    omitempty: bool | str
    decode: Callable[[Any], Any] | None
    sort_keys: bool


def _field(
    name: str,
    *,
    omitempty: bool | str = True,
    decode: Callable[[Any], Any] | None = None,
    sort_keys: bool = False,
    default: Any = None,
    default_factory: Callable[[], Any] | None = None,
    kw_only: bool = False,
) -> Any:
    """Declare a field serialised under the JSON member ``name``.

    ``omitempty`` drops None and empty containers; the value ``"zero"``
    also drops empty strings, zero and False.
    """
    metadata = {_SPEC_KEY: _JsonSpec(name, omitempty, decode, sort_keys)}
    if default_factory is not None:
        return dataclasses.field(
            default_factory=default_factory, metadata=metadata, kw_only=kw_only
        )
    return dataclasses.field(default=default, metadata=metadata, kw_only=kw_only)


def _object(cls: type) -> Callable[[Any], Any]:
    """Decoder turning a JSON object into an instance of ``cls``."""
    return lambda raw: cls.from_dict(raw)


def _list_of(decode: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Decoder applying ``decode`` to every non-null item of a JSON array."""
    return lambda raw: [None if item is None else decode(item) for item in raw]


def _map_of(decode: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Decoder applying ``decode`` to every non-null value of a JSON object."""
    return lambda raw: {
        key: None if item is None else decode(item) for key, item in raw.items()
    }


def _format_time(moment: datetime) -> str:
    """Format a timestamp as RFC 3339 with trailing fraction zeros trimmed."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    sign = "+" if offset >= timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, accepting ``Z`` and long fractions."""
    if not isinstance(text, str):
        raise TypeError(f"expected a timestamp string, got {type(text).__name__}")
    normalised = text.strip()
    if normalised[-1:] in ("Z", "z"):
        normalised = normalised[:-1] + "+00:00"
    normalised = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), normalised, 1)
    try:
        return datetime.fromisoformat(normalised)
    except ValueError as exc:
        raise ValueError(f"invalid timestamp {text!r}") from exc


def _is_empty(value: Any, omitempty: bool | str) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    if omitempty == "zero" and isinstance(value, (str, int, float)):
        return not value
    return False


def _encode(value: Any, sort_keys: bool = False) -> Any:
    """Turn a model value into plain JSON-ready data."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict) and not isinstance(value, type):
        return to_dict()
    if isinstance(value, Enum):
        return _encode(value.value, sort_keys)
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, dict):
        items = value.items()
        if sort_keys:
            items = sorted(items, key=lambda pair: str(pair[0]))
        return {str(key): _encode(item, sort_keys) for key, item in items}
    if isinstance(value, (list, tuple)):
        return [_encode(item, sort_keys) for item in value]
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def _dumps(data: Any, indent: int | None = None) -> str:
    """Serialise JSON data compactly, or indented, escaping HTML characters."""
    if indent is None:
        text = json.dumps(
            data, ensure_ascii=False, allow_nan=False, separators=(",", ":")
        )
    else:
        text = json.dumps(
            data,
            ensure_ascii=False,
            allow_nan=False,
            indent=indent,
            separators=(",", ": "),
        )
    return text.translate(_HTML_ESCAPES)


@dataclass
class PropertyBag:
    """Free-form properties; the base of every SARIF object."""

    properties: dict[str, Any] | None = _field(
        "properties", sort_keys=True, kw_only=True
    )

    _PROPERTIES_FIRST: ClassVar[bool] = False

    def add(self, key: str, value: Any) -> None:
        """Set the property ``key`` to ``value``."""
        if self.properties is None:
            self.properties = {}
        self.properties[key] = value

    def add_string(self, key: str, value: str) -> None:
        """Set a string property."""
        if not isinstance(value, str):
            raise TypeError(f"property {key!r} must be a string")
        self.add(key, value)

    def add_boolean(self, key: str, value: bool) -> None:
        """Set a boolean property."""
        if not isinstance(value, bool):
            raise TypeError(f"property {key!r} must be a boolean")
        self.add(key, value)

    def add_integer(self, key: str, value: int) -> None:
        """Set an integer property."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"property {key!r} must be an integer")
        self.add(key, value)

    def attach_property_bag(self, pb: PropertyBag) -> None:
        """Share the properties of another bag with this object."""
        self.properties = pb.properties

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this value, members in schema order."""
        members: dict[str, Any] = {}
        properties_entry: dict[str, Any] = {}
        for spec_field in dataclasses.fields(self):
            spec = spec_field.metadata.get(_SPEC_KEY)
            if spec is None:
                continue
            value = getattr(self, spec_field.name)
            if spec.omitempty and _is_empty(value, spec.omitempty):
                continue
            target = properties_entry if spec_field.name == "properties" else members
            target[spec.name] = _encode(value, spec.sort_keys)
        if self._PROPERTIES_FIRST:
            return {**properties_entry, **members}
        return {**members, **properties_entry}

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Build an instance from a decoded JSON object; unknown members are ignored."""
        if not isinstance(data, dict):
            raise TypeError(
                f"{cls.__name__} expects a JSON object, got {type(data).__name__}"
            )
        kwargs: dict[str, Any] = {}
        for spec_field in dataclasses.fields(cls):
            spec = spec_field.metadata.get(_SPEC_KEY)
            if spec is None or not spec_field.init or spec.name not in data:
                continue
            raw = data[spec.name]
            if raw is not None and spec.decode is not None:
                raw = spec.decode(raw)
            kwargs[spec_field.name] = raw
        return cls(**kwargs)

    def to_json(self, indent: int | None = None) -> str:
        """Serialise this value to a JSON string."""
        return _dumps(self.to_dict(), indent)