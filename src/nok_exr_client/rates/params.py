"""Request path and parameter builders for the EXR dataflow."""

from __future__ import annotations

from .queries import ExchangeRateQuery

SDMX_JSON_FORMAT = "sdmx-json"


def build_series_path(
    query: ExchangeRateQuery,
    *,
    quote_currency: str = "NOK",
    tenor: str = "SP",
) -> str:
    """Return the data path, e.g. ``data/EXR/M.USD+EUR.NOK.SP``."""

    key = ".".join(
        (
            query.frequency.value,
            "+".join(query.currencies),
            quote_currency,
            tenor,
        )
    )
    return f"data/EXR/{key}"


def build_exchange_rate_params(
    query: ExchangeRateQuery,
    *,
    locale: str = "no",
) -> dict[str, str]:
    return {
        "format": SDMX_JSON_FORMAT,
        "startPeriod": query.start_date,
        "endPeriod": query.end_date,
        "locale": locale,
    }


__all__ = [
    "SDMX_JSON_FORMAT",
    "build_series_path",
    "build_exchange_rate_params",
]
