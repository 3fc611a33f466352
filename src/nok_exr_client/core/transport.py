"""Sync HTTP transport with status evaluation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import NokExrClientConfig
from .errors import NokExrTransportError
from .response_parsing import evaluate_response
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    normalize_base_url,
    normalize_endpoint,
)

logger = logging.getLogger("nok_exr_client")


class SyncTransportClient(Protocol):
    def get(self, endpoint: str, params: Mapping[str, str]) -> object: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for the Norges Bank data API.

    Each request is a single attempt; failures surface immediately.
    """

    def __init__(
        self,
        config: NokExrClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=normalize_base_url(config),
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def request(self, endpoint: str, *, params: Mapping[str, str]) -> dict[str, object]:
        if self._closed:
            raise NokExrTransportError("transport is already closed")

        normalized_endpoint = normalize_endpoint(endpoint)
        logger.debug("request start endpoint=%s", normalized_endpoint)
        try:
            response = self._client.get(normalized_endpoint, params=params)
        except Exception as exc:
            logger.error(
                "request network error endpoint=%s error=%s",
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise NokExrTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        return evaluate_response(response, endpoint=normalized_endpoint)


__all__ = [
    "SyncTransport",
]
