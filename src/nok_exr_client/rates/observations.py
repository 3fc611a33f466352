"""Dense observation parsing for a single series."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from .models import Observation, TimeSeries

logger = logging.getLogger("nok_exr_client")

MISSING_VALUE = 0.0


def _parse_value(raw: object) -> float | None:
    """Return the float held by an SDMX observation entry, or None."""

    if isinstance(raw, (list, tuple)):
        if not raw:
            return None
        raw = raw[0]
    if raw is None or isinstance(raw, bool):
        return None
    try:
        if isinstance(raw, (int, float)):
            return float(raw)
        return float(str(raw).strip())
    except (ValueError, OverflowError):
        return None


def _observations_for(series_key: str, series: Mapping[str, object]) -> Mapping[str, object]:
    entry = series.get(series_key)
    if not isinstance(entry, Mapping):
        logger.warning("series key not found in response series_key=%s", series_key)
        return {}
    observations = entry.get("observations")
    if not isinstance(observations, Mapping):
        return {}
    return observations


def parse_series(
    axis: Sequence[str],
    series_key: str,
    series: Mapping[str, object],
    *,
    currency: str,
) -> TimeSeries:
    """Return ``currency``'s observations aligned to ``axis``.

    Positions without a usable value get 0.0 and ``present=False``; this
    never raises for bad values.
    """

    raw_observations = _observations_for(series_key, series)
    observations: list[Observation] = []
    missing = 0
    for index, time_period in enumerate(axis):
        value = _parse_value(raw_observations.get(str(index)))
        if value is None:
            missing += 1
            observations.append(
                Observation(time_period=time_period, value=MISSING_VALUE, present=False)
            )
            continue
        observations.append(Observation(time_period=time_period, value=value))

    if missing:
        logger.debug(
            "observations defaulted currency=%s series_key=%s missing=%s total=%s",
            currency,
            series_key,
            missing,
            len(axis),
        )
    return TimeSeries(currency=currency, observations=observations)


__all__ = [
    "MISSING_VALUE",
    "parse_series",
]
