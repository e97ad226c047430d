from collections.abc import Mapping

from domain.models.geo import GeoInfo

DEFAULT_COUNTRY = 'US'
DEFAULT_CURRENCY = 'USD'

COUNTRY_TO_CURRENCY: dict[str, str] = {
    'US': 'USD',
    'IN': 'INR',
    'GB': 'GBP',
    'CA': 'CAD',
    'AU': 'AUD',
    'DE': 'EUR',
    'FR': 'EUR',
    'NL': 'EUR',
    'ES': 'EUR',
    'IT': 'EUR',
    'JP': 'JPY',
    'CN': 'CNY',
}

CURRENCY_SYMBOL: dict[str, str] = {
    'USD': '$',
    'INR': '₹',
    'GBP': '£',
    'CAD': 'CA$',
    'AUD': 'A$',
    'EUR': '€',
    'JPY': '¥',
    'CNY': '¥',
}

# Edge/CDN headers carrying the visitor's ISO country code, in lookup order
COUNTRY_HEADERS = (
    'x-vercel-ip-country',
    'cf-ipcountry',
    'x-country-code',
    'x-nf-client-geo-country',
    'x-appengine-country',
)


def currency_symbol(currency: str) -> str:
    return CURRENCY_SYMBOL.get(currency.upper(), CURRENCY_SYMBOL[DEFAULT_CURRENCY])


def geo_from_country(country_code: str | None = None) -> GeoInfo:
    """Returns GeoInfo for a 2-letter country code (case-insensitive).

    Unknown or missing codes fall back to the US dollar.
    """
    country = (country_code or DEFAULT_COUNTRY).upper()
    currency = COUNTRY_TO_CURRENCY.get(country, DEFAULT_CURRENCY)
    return GeoInfo(country=country, currency=currency, symbol=currency_symbol(currency))


def country_from_headers(headers: Mapping[str, str]) -> str | None:
    for header in COUNTRY_HEADERS:
        value = headers.get(header)
        if value:
            # first non-empty header wins, even when malformed
            return value.upper() if len(value) == 2 else None
    return None
