"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import validate_client_config
from .config import NokExrClientConfig
from .core.errors import NokExrClientClosedError
from .core.transport import SyncTransport
from .rates.models import AlignedDataset
from .rates.queries import ExchangeRateQuery
from .rates.service import ExchangeRateService


class _GuardedExchangeRateService:
    """Guard wrapper to block usage after client close."""

    def __init__(self, owner: "NokExrClient", delegate: ExchangeRateService) -> None:
        self._owner = owner
        self._delegate = delegate

    def get_rates(self, query: ExchangeRateQuery) -> AlignedDataset:
        self._owner._ensure_open()
        return self._delegate.get_rates(query)


class NokExrClient:
    """Public Norges Bank exchange-rate client."""

    def __init__(
        self,
        *,
        config: NokExrClientConfig | None = None,
        transport: SyncTransport | None = None,
        rates_service: ExchangeRateService | None = None,
    ) -> None:
        self._config = config or NokExrClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        internal_rates = rates_service or ExchangeRateService(self._transport, self._config)
        self._closed = False
        self.rates = _GuardedExchangeRateService(self, internal_rates)

    def _ensure_open(self) -> None:
        if self._closed:
            raise NokExrClientClosedError("NokExrClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "NokExrClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "NokExrClient",
]
