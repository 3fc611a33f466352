"""Query models."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .models import Frequency


@dataclass(slots=True, frozen=True)
class ExchangeRateQuery:
    currencies: Sequence[str]
    frequency: Frequency | str
    start_date: str
    end_date: str

    def __post_init__(self) -> None:
        if isinstance(self.currencies, str):
            raise TypeError("currencies must be a sequence of str, not str")
        if not isinstance(self.currencies, Sequence):
            raise TypeError("currencies must be Sequence[str]")
        normalized: list[str] = []
        for currency in self.currencies:
            if not isinstance(currency, str):
                raise TypeError("currencies entries must be str")
            normalized.append(currency)
        object.__setattr__(self, "currencies", tuple(normalized))
        object.__setattr__(self, "frequency", Frequency.parse(self.frequency))

    def with_currencies(self, currencies: Sequence[str]) -> "ExchangeRateQuery":
        return replace(self, currencies=tuple(currencies))


__all__ = [
    "ExchangeRateQuery",
]
