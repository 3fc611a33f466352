"""Multi-series alignment onto a shared time axis."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..core.errors import AlignmentError
from .models import AlignedDataset, TimeSeries


def _check_series(axis: tuple[str, ...], series: TimeSeries) -> None:
    if len(series.observations) != len(axis):
        raise AlignmentError(
            f"series {series.currency} has {len(series.observations)} observations, "
            f"axis has {len(axis)}"
        )
    for index, observation in enumerate(series.observations):
        if observation.time_period != axis[index]:
            raise AlignmentError(
                f"series {series.currency} period {observation.time_period!r} "
                f"does not match axis {axis[index]!r} at position {index}"
            )


def align_series(axis: Sequence[str], series: Iterable[TimeSeries]) -> AlignedDataset:
    frozen_axis = tuple(axis)
    ordered = tuple(series)
    for item in ordered:
        _check_series(frozen_axis, item)
    return AlignedDataset(axis=frozen_axis, series=ordered)


__all__ = [
    "align_series",
]
