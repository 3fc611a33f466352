"""Accessors for the parts of an SDMX-JSON data message the engine reads."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.errors import NokExrProtocolError

JsonObject = Mapping[str, object]


def _as_object(value: object, *, name: str) -> JsonObject:
    if not isinstance(value, Mapping):
        raise NokExrProtocolError(f"{name} must be an object")
    return value


def data_section(payload: JsonObject) -> JsonObject:
    return _as_object(payload.get("data"), name="data")


def dimensions_section(payload: JsonObject) -> JsonObject:
    structure = _as_object(data_section(payload).get("structure"), name="data.structure")
    return _as_object(structure.get("dimensions"), name="data.structure.dimensions")


def dimension_list(payload: JsonObject, role: str) -> list[JsonObject]:
    """Return ``data.structure.dimensions.<role>`` (``observation`` or ``series``)."""

    raw = dimensions_section(payload).get(role, [])
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise NokExrProtocolError(f"data.structure.dimensions.{role} must be a list")
    for item in raw:
        if not isinstance(item, Mapping):
            raise NokExrProtocolError(f"data.structure.dimensions.{role} element must be an object")
    return raw


def find_dimension(dimensions: list[JsonObject], dimension_id: str) -> JsonObject | None:
    for dimension in dimensions:
        if dimension.get("id") == dimension_id:
            return dimension
    return None


def dimension_values(dimension: JsonObject) -> list[JsonObject]:
    raw = dimension.get("values", [])
    if not isinstance(raw, list):
        raise NokExrProtocolError(f"dimension {dimension.get('id')!r} values must be a list")
    # Values are addressed by position, so a malformed entry cannot be skipped.
    for value in raw:
        if not isinstance(value, Mapping):
            raise NokExrProtocolError(
                f"dimension {dimension.get('id')!r} value must be an object"
            )
    return raw


def series_map(payload: JsonObject) -> JsonObject:
    """Return the first data set's ``series`` mapping; empty when there is none."""

    data_sets = data_section(payload).get("dataSets", [])
    if not isinstance(data_sets, list):
        raise NokExrProtocolError("data.dataSets must be a list")
    if not data_sets:
        return {}
    first = _as_object(data_sets[0], name="data.dataSets[0]")
    series = first.get("series", {})
    if series is None:
        return {}
    return _as_object(series, name="data.dataSets[0].series")


__all__ = [
    "JsonObject",
    "data_section",
    "dimensions_section",
    "dimension_list",
    "find_dimension",
    "dimension_values",
    "series_map",
]
