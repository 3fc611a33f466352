"""Shared request preparation for sync/async services."""

from __future__ import annotations

from ..config import NokExrClientConfig
from .params import build_exchange_rate_params, build_series_path
from .queries import ExchangeRateQuery
from .validators import normalize_exchange_rate_query


def prepare_exchange_rate_request(
    query: ExchangeRateQuery,
    config: NokExrClientConfig,
) -> tuple[ExchangeRateQuery, str, dict[str, str]]:
    """Return the normalized query with its endpoint path and query params."""

    prepared = normalize_exchange_rate_query(query)
    endpoint = build_series_path(
        prepared,
        quote_currency=config.quote_currency,
        tenor=config.tenor,
    )
    params = build_exchange_rate_params(prepared, locale=config.locale)
    return prepared, endpoint, params


__all__ = [
    "prepare_exchange_rate_request",
]
