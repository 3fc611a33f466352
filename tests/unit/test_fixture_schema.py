from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    "filename",
    [
        "exr_annual_usd_eur_gbp_sek.json",
        "exr_monthly_usd_eur_gbp_sek.json",
        "exr_daily_usd_eur_gbp_sek.json",
        "exr_annual_usd.json",
        "exr_missing_time_period.json",
    ],
)
def test_fixture_has_sdmx_json_shape(fixture_loader, filename):
    payload = fixture_loader(filename)
    data = payload["data"]
    assert isinstance(data["dataSets"], list)
    assert isinstance(data["dataSets"][0]["series"], dict)
    assert isinstance(data["structure"]["dimensions"]["observation"], list)
    for key in data["dataSets"][0]["series"]:
        assert len(key.split(":")) == 4


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("exr_annual_usd_eur_gbp_sek.json", ["USD", "EUR", "GBP", "SEK"]),
        ("exr_monthly_usd_eur_gbp_sek.json", ["SEK", "GBP", "USD", "EUR"]),
        ("exr_daily_usd_eur_gbp_sek.json", ["USD", "GBP", "EUR", "SEK"]),
    ],
)
def test_fixture_base_currency_order(fixture_loader, filename, expected):
    series_dimensions = fixture_loader(filename)["data"]["structure"]["dimensions"]["series"]
    base = next(d for d in series_dimensions if d["id"] == "BASE_CUR")
    assert [value["id"] for value in base["values"]] == expected
