from __future__ import annotations

import nok_exr_client
import nok_exr_client.rates as rates


def test_package_exports_clients_and_config():
    assert set(nok_exr_client.__all__) == {
        "NokExrClient",
        "AsyncNokExrClient",
        "NokExrClientConfig",
    }


def test_rates_package_exports_public_models_only():
    expected = {
        "ExchangeRateQuery",
        "Frequency",
        "Observation",
        "TimeSeries",
        "AlignedDataset",
        "LatestRequestGate",
        "parse_exchange_rate_response",
    }
    assert expected.issubset(set(rates.__all__))
    assert "ExchangeRateService" not in rates.__all__
    assert "AsyncExchangeRateService" not in rates.__all__
    assert not hasattr(rates, "ExchangeRateService")
