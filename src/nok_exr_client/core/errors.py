"""Error types and status mapping."""

from __future__ import annotations

from collections.abc import Mapping


def extract_error_message(payload: Mapping[str, object] | None) -> str | None:
    """Return the first error title/detail of an SDMX error body, if any."""

    if not isinstance(payload, Mapping):
        return None
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors:
        return None
    first = errors[0]
    if not isinstance(first, Mapping):
        return None
    for key in ("title", "detail", "message"):
        value = first.get(key)
        if value is not None:
            return str(value)
    return None


class NokExrError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class NokExrTransportError(NokExrError):
    """Network/transport-level failure."""


class NokExrClientClosedError(NokExrError):
    """Raised when client is used after close."""


class NokExrValidationError(NokExrError):
    """Invalid input / request rejected."""


class UnknownFrequencyError(NokExrValidationError):
    """Frequency is not one of the recognised sampling codes."""


class UnknownCurrencyError(NokExrValidationError):
    """No series position is known for a requested currency."""


class NokExrNoDataError(NokExrError):
    """The API has no observations for the requested key and period."""


class NokExrServerError(NokExrError):
    """Server-side unexpected error."""


class NokExrProtocolError(NokExrError):
    """Response shape is not the expected SDMX-JSON document."""


class MissingDimensionError(NokExrProtocolError):
    """Observation dimension metadata lacks the TIME_PERIOD dimension."""


class AlignmentError(NokExrError, AssertionError):
    """Aligned series disagree with the time axis."""


class StaleResponseError(NokExrError):
    """A newer request superseded the one that produced this response."""

    def __init__(self, message: str, *, generation: int, latest_generation: int) -> None:
        super().__init__(message, cause="stale")
        self.generation = generation
        self.latest_generation = latest_generation


def classify_http_error(
    payload: Mapping[str, object] | None,
    *,
    http_status: int | None,
) -> NokExrError | None:
    """Map HTTP status to domain exceptions."""

    if http_status is None:
        return NokExrProtocolError("Missing HTTP status")
    if 200 <= http_status < 300:
        return None

    message = extract_error_message(payload) or "Norges Bank API request failed"
    if http_status == 404:
        return NokExrNoDataError(message, http_status=http_status, cause="no_data")
    if http_status >= 500:
        return NokExrServerError(message, http_status=http_status, cause="server")
    if http_status >= 400:
        return NokExrValidationError(message, http_status=http_status)
    return NokExrProtocolError(
        "Unexpected HTTP status in Norges Bank response",
        http_status=http_status,
    )


__all__ = [
    "NokExrError",
    "NokExrTransportError",
    "NokExrClientClosedError",
    "NokExrValidationError",
    "UnknownFrequencyError",
    "UnknownCurrencyError",
    "NokExrNoDataError",
    "NokExrServerError",
    "NokExrProtocolError",
    "MissingDimensionError",
    "AlignmentError",
    "StaleResponseError",
    "extract_error_message",
    "classify_http_error",
]
