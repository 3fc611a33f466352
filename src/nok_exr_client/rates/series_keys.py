"""Series key resolution for multi-currency EXR responses.

The API numbers the base-currency dimension in its own sort order, which is
neither the request order nor the same across frequencies. The ordering seen
for each frequency is recorded in ``SERIES_ORDERING``; a currency's index is
its rank in that ordering among the currencies actually requested, since the
response only numbers the series it contains.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..core.errors import UnknownCurrencyError
from .models import Frequency
from .sdmx import JsonObject, dimension_list, dimension_values, find_dimension

BASE_CURRENCY_DIMENSION = "BASE_CUR"

SERIES_ORDERING: Mapping[Frequency, tuple[str, ...]] = {
    Frequency.ANNUAL: ("USD", "EUR", "GBP", "SEK"),
    Frequency.MONTHLY: ("SEK", "GBP", "USD", "EUR"),
    Frequency.DAILY: ("USD", "GBP", "EUR", "SEK"),
}


def format_series_key(currency_index: int) -> str:
    return f"0:{currency_index}:0:0"


def resolve_series_keys(
    frequency: Frequency | str,
    currencies: Sequence[str],
) -> tuple[str, ...]:
    """Return one series key per currency, in the order given."""

    resolved = Frequency.parse(frequency)
    requested = tuple(currencies)
    if len(requested) == 1:
        return (format_series_key(0),)

    ordering = SERIES_ORDERING[resolved]
    unknown = [currency for currency in requested if currency not in ordering]
    if unknown:
        raise UnknownCurrencyError(
            f"no {resolved.name.lower()} series ordering known for: {', '.join(unknown)}"
        )

    ranked = [currency for currency in ordering if currency in requested]
    return tuple(format_series_key(ranked.index(currency)) for currency in requested)


def resolve_series_key(
    frequency: Frequency | str,
    currency: str,
    *,
    currencies: Sequence[str] | None = None,
) -> str:
    """Return the key of one currency within a request for ``currencies``.

    ``currencies`` defaults to every currency of the frequency's ordering.
    """

    requested = tuple(currencies) if currencies is not None else None
    if requested is None:
        requested = SERIES_ORDERING[Frequency.parse(frequency)]
    if currency not in requested:
        raise UnknownCurrencyError(f"{currency} is not part of the request")
    keys = resolve_series_keys(frequency, requested)
    return keys[requested.index(currency)]


def can_resolve_from_ordering(frequency: Frequency | str, currencies: Sequence[str]) -> bool:
    if len(currencies) == 1:
        return True
    ordering = SERIES_ORDERING[Frequency.parse(frequency)]
    return all(currency in ordering for currency in currencies)


def resolve_series_keys_from_structure(
    payload: JsonObject,
    currencies: Sequence[str],
) -> tuple[str, ...]:
    """Derive keys from the ``BASE_CUR`` series dimension of a response."""

    dimension = find_dimension(dimension_list(payload, "series"), BASE_CURRENCY_DIMENSION)
    if dimension is None:
        raise UnknownCurrencyError(
            f"response has no {BASE_CURRENCY_DIMENSION} series dimension to place currencies"
        )
    positions = {
        str(value.get("id")): index for index, value in enumerate(dimension_values(dimension))
    }
    missing = [currency for currency in currencies if currency not in positions]
    if missing:
        raise UnknownCurrencyError(
            f"response {BASE_CURRENCY_DIMENSION} dimension lacks: {', '.join(missing)}"
        )
    return tuple(format_series_key(positions[currency]) for currency in currencies)


__all__ = [
    "BASE_CURRENCY_DIMENSION",
    "SERIES_ORDERING",
    "format_series_key",
    "resolve_series_keys",
    "resolve_series_key",
    "can_resolve_from_ordering",
    "resolve_series_keys_from_structure",
]
