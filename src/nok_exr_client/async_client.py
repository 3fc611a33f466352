"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import validate_client_config
from .config import NokExrClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import NokExrClientClosedError, NokExrError
from .rates.async_service import AsyncExchangeRateService
from .rates.gate import LatestRequestGate
from .rates.models import AlignedDataset
from .rates.queries import ExchangeRateQuery


class _GuardedAsyncExchangeRateService:
    """Guard wrapper to block usage after async client close."""

    def __init__(
        self,
        owner: "AsyncNokExrClient",
        delegate: AsyncExchangeRateService,
        gate: LatestRequestGate,
    ) -> None:
        self._owner = owner
        self._delegate = delegate
        self._gate = gate

    async def get_rates(self, query: ExchangeRateQuery) -> AlignedDataset:
        self._owner._ensure_open()
        return await self._delegate.get_rates(query)

    async def get_latest_rates(self, query: ExchangeRateQuery) -> AlignedDataset:
        """Like ``get_rates``, but raise ``StaleResponseError`` when another
        ``get_latest_rates`` call started while this one was in flight.

        A superseded request raises ``StaleResponseError`` even when it failed.
        """

        self._owner._ensure_open()
        generation = self._gate.begin()
        try:
            result = await self._delegate.get_rates(query)
        except NokExrError as exc:
            if not self._gate.is_current(generation):
                raise self._gate.stale_error(generation) from exc
            raise
        self._owner._ensure_open()
        return self._gate.accept(generation, result)


class AsyncNokExrClient:
    """Public async Norges Bank exchange-rate client."""

    def __init__(
        self,
        *,
        config: NokExrClientConfig | None = None,
        transport: AsyncTransport | None = None,
        rates_service: AsyncExchangeRateService | None = None,
    ) -> None:
        self._config = config or NokExrClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        internal_rates = rates_service or AsyncExchangeRateService(self._transport, self._config)
        self._closed = False
        self.rates = _GuardedAsyncExchangeRateService(self, internal_rates, LatestRequestGate())

    def _ensure_open(self) -> None:
        if self._closed:
            raise NokExrClientClosedError("AsyncNokExrClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncNokExrClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncNokExrClient",
]
