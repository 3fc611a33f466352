"""Time axis extraction from observation dimension metadata."""

from __future__ import annotations

from ..core.errors import MissingDimensionError, NokExrProtocolError
from .sdmx import JsonObject, dimension_list, dimension_values, find_dimension

TIME_PERIOD_DIMENSION = "TIME_PERIOD"


def extract_time_axis(payload: JsonObject) -> tuple[str, ...]:
    """Return the period labels of the ``TIME_PERIOD`` observation dimension.

    The API lists the values chronologically, so their order is kept as is.
    A value without ``name`` falls back to its ``id``.
    """

    try:
        dimensions = dimension_list(payload, "observation")
    except NokExrProtocolError as exc:
        raise MissingDimensionError(
            f"{TIME_PERIOD_DIMENSION} dimension not found in the API response"
        ) from exc

    dimension = find_dimension(dimensions, TIME_PERIOD_DIMENSION)
    if dimension is None:
        raise MissingDimensionError(
            f"{TIME_PERIOD_DIMENSION} dimension not found in the API response"
        )

    axis: list[str] = []
    for value in dimension_values(dimension):
        label = value.get("name")
        if label is None:
            label = value.get("id")
        axis.append("" if label is None else str(label))
    return tuple(axis)


__all__ = [
    "TIME_PERIOD_DIMENSION",
    "extract_time_axis",
]
