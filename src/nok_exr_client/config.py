"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

_SUPPORTED_LOCALES = frozenset({"no", "en"})


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class NokExrClientConfig:
    """Runtime configuration for the exchange-rate client."""

    base_url: str = "https://data.norges-bank.no/api"
    user_agent: str = "nok-exr-client/0.1.0"
    locale: str = "no"
    quote_currency: str = "NOK"
    tenor: str = "SP"

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.locale not in _SUPPORTED_LOCALES:
            raise ValueError("locale must be one of: en, no")
        if not self.quote_currency:
            raise ValueError("quote_currency must not be empty")
        if not self.tenor:
            raise ValueError("tenor must not be empty")
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "NokExrClientConfig",
]
