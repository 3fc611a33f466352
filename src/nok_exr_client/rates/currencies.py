"""Catalogue of currencies quoted against NOK in the EXR dataflow."""

from __future__ import annotations

from collections.abc import Mapping

CURRENCIES: Mapping[str, str] = {
    "USD": "Amerikanske dollar",
    "AUD": "Australske dollar",
    "BDT": "Bangladeshi taka",
    "BYN": "Belarusiske nye rubler",
    "BRL": "Brasilianske real",
    "GBP": "Britiske pund",
    "BGN": "Bulgarske lev",
    "DKK": "Danske kroner",
    "EUR": "Euro",
    "PHP": "Filippinske peso",
    "HKD": "Hong Kong dollar",
    "XDR": "IMF Spesielle trekkrettigheter",
    "I44": "Importveid kursindeks",
    "INR": "Indiske rupi",
    "IDR": "Indonesiske rupiah",
    "TWI": "Industriens effektive valutakurs",
    "ISK": "Islandske kroner",
    "JPY": "Japanske yen",
    "CAD": "Kanadiske dollar",
    "CNY": "Kinesiske yuan",
    "HRK": "Kroatiske kuna",
    "MYR": "Malaysiske ringgit",
    "MXN": "Meksikanske peso",
    "MMK": "Myanmar kyat",
    "NZD": "New Zealand dollar",
    "ILS": "Ny israelsk shekel",
    "RON": "Ny rumenske leu",
    "TWD": "Nye taiwanske dollar",
    "PKR": "Pakistanske rupi",
    "PLN": "Polske zloty",
    "RUB": "Russiske rubler",
    "SGD": "Singapore dollar",
    "CHF": "Sveitsiske franc",
    "SEK": "Svenske kroner",
    "ZAR": "Sørafrikanske rand",
    "KRW": "Sørkoreanske won",
    "THB": "Thailandske baht",
    "CZK": "Tsjekkiske koruna",
    "TRY": "Tyrkiske lira",
    "HUF": "Ungarske forinter",
    "VND": "Vietnamesiske dong",
}


def currency_label(code: str) -> str:
    """Return ``"USD - Amerikanske dollar"`` style label; unknown codes stay bare."""

    name = CURRENCIES.get(code)
    return f"{code} - {name}" if name else code


def search_currencies(text: str) -> tuple[str, ...]:
    needle = text.strip().lower()
    if not needle:
        return ()
    labels = (currency_label(code) for code in CURRENCIES)
    return tuple(label for label in labels if needle in label.lower())


__all__ = [
    "CURRENCIES",
    "currency_label",
    "search_currencies",
]
