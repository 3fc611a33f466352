from __future__ import annotations

from nok_exr_client.rates.currencies import CURRENCIES, currency_label, search_currencies


def test_catalogue_codes_are_three_characters():
    assert len(CURRENCIES) == 41
    assert all(len(code) == 3 for code in CURRENCIES)


def test_currency_label():
    assert currency_label("USD") == "USD - Amerikanske dollar"
    assert currency_label("XYZ") == "XYZ"


def test_search_is_case_insensitive_and_matches_names():
    assert search_currencies("KRONER") == (
        "DKK - Danske kroner",
        "ISK - Islandske kroner",
        "SEK - Svenske kroner",
    )


def test_search_matches_codes():
    assert search_currencies("eur") == ("EUR - Euro",)


def test_search_blank_text_returns_nothing():
    assert search_currencies("") == ()
    assert search_currencies("   ") == ()
