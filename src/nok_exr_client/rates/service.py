"""Single-request exchange-rate executor."""

from __future__ import annotations

from ..config import NokExrClientConfig
from ..core.transport import SyncTransport
from .models import AlignedDataset
from .parser import parse_exchange_rate_response
from .queries import ExchangeRateQuery
from .service_shared import prepare_exchange_rate_request


class ExchangeRateService:
    """Fetch one EXR response and turn it into an aligned dataset."""

    def __init__(self, transport: SyncTransport, config: NokExrClientConfig) -> None:
        self._transport = transport
        self._config = config

    def get_rates(self, query: ExchangeRateQuery) -> AlignedDataset:
        prepared, endpoint, params = prepare_exchange_rate_request(query, self._config)
        payload = self._transport.request(endpoint, params=params)
        return parse_exchange_rate_response(payload, prepared)


__all__ = [
    "ExchangeRateService",
]
