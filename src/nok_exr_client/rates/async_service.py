"""Async single-request exchange-rate executor."""

from __future__ import annotations

from ..config import NokExrClientConfig
from ..core.async_transport import AsyncTransport
from .models import AlignedDataset
from .parser import parse_exchange_rate_response
from .queries import ExchangeRateQuery
from .service_shared import prepare_exchange_rate_request


class AsyncExchangeRateService:
    """Async counterpart of ``ExchangeRateService``."""

    def __init__(self, transport: AsyncTransport, config: NokExrClientConfig) -> None:
        self._transport = transport
        self._config = config

    async def get_rates(self, query: ExchangeRateQuery) -> AlignedDataset:
        prepared, endpoint, params = prepare_exchange_rate_request(query, self._config)
        payload = await self._transport.request(endpoint, params=params)
        return parse_exchange_rate_response(payload, prepared)


__all__ = [
    "AsyncExchangeRateService",
]
