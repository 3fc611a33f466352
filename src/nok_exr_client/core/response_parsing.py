"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

import logging
from typing import Protocol

from .errors import NokExrError, NokExrProtocolError, classify_http_error

logger = logging.getLogger("nok_exr_client")


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse response JSON payload and map parse failures to domain errors."""

    try:
        payload = response.json()
    except Exception as exc:
        raise _json_parse_error(http_status=http_status) from exc

    if not isinstance(payload, dict):
        raise NokExrProtocolError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    if any(not isinstance(key, str) for key in payload):
        raise NokExrProtocolError(
            "response JSON object keys must be strings",
            http_status=http_status,
        )
    return payload


def classify_response(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> NokExrError | None:
    """Map an HTTP response to a domain error, or None when it succeeded.

    Error bodies are read best-effort; a body that is not JSON only loses
    the server's message.
    """

    if http_status is not None and 200 <= http_status < 300:
        return None
    try:
        payload = response.json()
    except Exception:
        payload = None
    return classify_http_error(
        payload if isinstance(payload, dict) else None,
        http_status=http_status,
    )


def evaluate_response(response: JsonPayloadResponse, *, endpoint: str) -> dict[str, object]:
    """Return the JSON body of a successful response or raise the mapped error."""

    http_status = getattr(response, "status_code", None)
    logger.debug("response received endpoint=%s http_status=%s", endpoint, http_status)

    mapped_error = classify_response(response, http_status=http_status)
    if mapped_error is not None:
        logger.error(
            "request failed endpoint=%s http_status=%s error=%s",
            endpoint,
            http_status,
            mapped_error.__class__.__name__,
        )
        raise mapped_error
    try:
        payload = parse_json_payload(response, http_status=http_status)
    except NokExrError:
        logger.error(
            "response parse error endpoint=%s http_status=%s",
            endpoint,
            http_status,
        )
        raise
    logger.info("request success endpoint=%s", endpoint)
    return payload


def _json_parse_error(*, http_status: int | None) -> NokExrError:
    mapped = classify_http_error(None, http_status=http_status)
    if mapped is not None:
        return mapped
    return NokExrProtocolError(
        "response body is not valid JSON",
        http_status=http_status,
    )


__all__ = [
    "JsonPayloadResponse",
    "parse_json_payload",
    "classify_response",
    "evaluate_response",
]
