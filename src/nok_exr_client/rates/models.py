"""Exchange-rate domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.errors import UnknownFrequencyError


class Frequency(str, Enum):
    """Sampling frequency of an EXR series, valued by its API code."""

    ANNUAL = "A"
    MONTHLY = "M"
    DAILY = "B"

    @classmethod
    def parse(cls, value: "Frequency | str") -> "Frequency":
        if isinstance(value, Frequency):
            return value
        if isinstance(value, str):
            text = value.strip().upper()
            for member in cls:
                if text in (member.value, member.name):
                    return member
        raise UnknownFrequencyError(f"unknown frequency: {value!r}")


@dataclass(slots=True, frozen=True)
class Observation:
    time_period: str
    value: float
    # False when the API had no usable value and ``value`` is the 0.0 default.
    present: bool = True


@dataclass(slots=True, frozen=True)
class TimeSeries:
    currency: str
    observations: tuple[Observation, ...] | list[Observation] = ()

    def __post_init__(self) -> None:
        if isinstance(self.observations, tuple):
            return
        object.__setattr__(self, "observations", tuple(self.observations))

    @property
    def values(self) -> tuple[float, ...]:
        return tuple(observation.value for observation in self.observations)


@dataclass(slots=True, frozen=True)
class AlignedDataset:
    """Time axis plus one equally long series per requested currency."""

    axis: tuple[str, ...] | list[str]
    series: tuple[TimeSeries, ...] | list[TimeSeries]

    def __post_init__(self) -> None:
        if not isinstance(self.axis, tuple):
            object.__setattr__(self, "axis", tuple(self.axis))
        if not isinstance(self.series, tuple):
            object.__setattr__(self, "series", tuple(self.series))

    @property
    def labels(self) -> list[str]:
        return list(self.axis)

    @property
    def currencies(self) -> tuple[str, ...]:
        return tuple(item.currency for item in self.series)

    def values_by_currency(self) -> dict[str, list[float]]:
        return {item.currency: list(item.values) for item in self.series}


__all__ = [
    "Frequency",
    "Observation",
    "TimeSeries",
    "AlignedDataset",
]
