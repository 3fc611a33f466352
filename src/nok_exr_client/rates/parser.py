"""Parser from an SDMX-JSON EXR payload into an aligned dataset."""

from __future__ import annotations

from collections.abc import Sequence

from .aligner import align_series
from .models import AlignedDataset, Frequency
from .observations import parse_series
from .queries import ExchangeRateQuery
from .sdmx import JsonObject, series_map
from .series_keys import (
    can_resolve_from_ordering,
    resolve_series_keys,
    resolve_series_keys_from_structure,
)
from .time_axis import extract_time_axis
from .validators import normalize_exchange_rate_query


def resolve_keys_for_payload(
    payload: JsonObject,
    *,
    frequency: Frequency | str,
    currencies: Sequence[str],
) -> tuple[str, ...]:
    """Use the known frequency ordering, or the response's currency dimension
    when a currency falls outside it."""

    if can_resolve_from_ordering(frequency, currencies):
        return resolve_series_keys(frequency, currencies)
    return resolve_series_keys_from_structure(payload, currencies)


def parse_rates_payload(
    payload: JsonObject,
    *,
    frequency: Frequency | str,
    currencies: Sequence[str],
) -> AlignedDataset:
    axis = extract_time_axis(payload)
    keys = resolve_keys_for_payload(payload, frequency=frequency, currencies=currencies)
    series = series_map(payload)
    parsed = [
        parse_series(axis, key, series, currency=currency)
        for currency, key in zip(currencies, keys)
    ]
    return align_series(axis, parsed)


def parse_exchange_rate_response(
    payload: JsonObject,
    query: ExchangeRateQuery,
) -> AlignedDataset:
    normalized = normalize_exchange_rate_query(query)
    return parse_rates_payload(
        payload,
        frequency=normalized.frequency,
        currencies=normalized.currencies,
    )


__all__ = [
    "resolve_keys_for_payload",
    "parse_rates_payload",
    "parse_exchange_rate_response",
]
