"""Exchange-rate service package."""

from .currencies import CURRENCIES, currency_label, search_currencies
from .gate import LatestRequestGate
from .models import AlignedDataset, Frequency, Observation, TimeSeries
from .parser import parse_exchange_rate_response
from .queries import ExchangeRateQuery

__all__ = [
    "ExchangeRateQuery",
    "Frequency",
    "Observation",
    "TimeSeries",
    "AlignedDataset",
    "LatestRequestGate",
    "CURRENCIES",
    "currency_label",
    "search_currencies",
    "parse_exchange_rate_response",
]
