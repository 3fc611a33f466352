from __future__ import annotations

import pytest

from nok_exr_client.client import NokExrClient
from nok_exr_client.config import NokExrClientConfig
from nok_exr_client.core.errors import (
    MissingDimensionError,
    NokExrClientClosedError,
    NokExrValidationError,
)
from nok_exr_client.core.transport import SyncTransport
from nok_exr_client.rates.queries import ExchangeRateQuery
from tests.shared.client_fakes import DummyTransport
from tests.shared.transport import Response, SyncSequencedClient, build_config

FOUR = ["USD", "EUR", "GBP", "SEK"]


def _query(frequency: str = "A", currencies=("USD",)) -> ExchangeRateQuery:
    return ExchangeRateQuery(
        currencies=currencies,
        frequency=frequency,
        start_date="2019-01-01",
        end_date="2023-12-31",
    )


def test_client_context_manager_closes_transport():
    transport = DummyTransport()
    with NokExrClient(transport=transport) as client:
        assert client is not None
    assert transport.closed is True


def test_client_raises_when_used_after_close():
    transport = DummyTransport()
    client = NokExrClient(transport=transport)
    client.close()
    with pytest.raises(NokExrClientClosedError):
        client.rates.get_rates(_query())


def test_client_rejects_invalid_config():
    with pytest.raises(NokExrValidationError, match="base_url"):
        NokExrClient(config=NokExrClientConfig(base_url=""), transport=DummyTransport())


def test_client_builds_request_from_query():
    transport = DummyTransport()
    with NokExrClient(transport=transport) as client:
        client.rates.get_rates(_query())

    assert transport.requests == [
        (
            "data/EXR/A.USD.NOK.SP",
            {
                "format": "sdmx-json",
                "startPeriod": "2019-01-01",
                "endPeriod": "2023-12-31",
                "locale": "no",
            },
        )
    ]


def test_client_returns_aligned_dataset_in_request_order(fixture_loader):
    transport = DummyTransport(fixture_loader("exr_monthly_usd_eur_gbp_sek.json"))
    with NokExrClient(transport=transport) as client:
        dataset = client.rates.get_rates(_query("M", FOUR))

    assert dataset.currencies == tuple(FOUR)
    assert dataset.labels == ["2024-01", "2024-02", "2024-03"]
    assert dataset.series[0].values == (10.4647, 10.5974, 10.5434)


def test_client_over_http_transport_parses_fixture(fixture_loader):
    http_client = SyncSequencedClient(
        [Response(200, fixture_loader("exr_annual_usd_eur_gbp_sek.json"))]
    )
    transport = SyncTransport(build_config(), client=http_client)
    with NokExrClient(transport=transport) as client:
        dataset = client.rates.get_rates(_query("A", FOUR))

    assert http_client.calls[0][0] == "data/EXR/A.USD+EUR+GBP+SEK.NOK.SP"
    assert dataset.values_by_currency()["EUR"][0] == 9.8511


def test_client_propagates_missing_dimension(fixture_loader):
    transport = DummyTransport(fixture_loader("exr_missing_time_period.json"))
    with NokExrClient(transport=transport) as client:
        with pytest.raises(MissingDimensionError):
            client.rates.get_rates(_query())


def test_client_validates_query_before_request():
    transport = DummyTransport()
    with NokExrClient(transport=transport) as client:
        with pytest.raises(NokExrValidationError):
            client.rates.get_rates(_query(currencies=("DOLLAR",)))
    assert transport.requests == []
