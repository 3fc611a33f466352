"""Input validation and normalization."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import replace
from datetime import date

from ..core.errors import NokExrValidationError
from .queries import ExchangeRateQuery

_CURRENCY_PATTERN = re.compile(r"^[A-Z0-9]{3}$")
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _normalize_currency(value: str) -> str:
    text = value.strip().upper()
    if not _CURRENCY_PATTERN.fullmatch(text):
        raise NokExrValidationError(f"currency must be a 3-character code: {value!r}")
    return text


def _parse_iso_date(value: str | None, *, name: str) -> date:
    if value is None:
        raise NokExrValidationError(f"{name} is required")
    text = value.strip()
    if not _DATE_PATTERN.fullmatch(text):
        raise NokExrValidationError(f"{name} must be formatted as YYYY-MM-DD")
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise NokExrValidationError(f"{name} is not a valid date") from exc


def _dedupe_keep_order(values: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            out.append(value)
    return tuple(out)


def normalize_exchange_rate_query(query: ExchangeRateQuery) -> ExchangeRateQuery:
    if not query.currencies:
        raise NokExrValidationError("currencies must not be empty")
    currencies = _dedupe_keep_order(_normalize_currency(c) for c in query.currencies)

    start = _parse_iso_date(query.start_date, name="start_date")
    end = _parse_iso_date(query.end_date, name="end_date")
    if start > end:
        raise NokExrValidationError("start_date must not be after end_date")

    return replace(
        query,
        currencies=currencies,
        start_date=start.isoformat(),
        end_date=end.isoformat(),
    )


__all__ = [
    "normalize_exchange_rate_query",
]
