# nosec B101


import pytest

from application.services.geo_service import (
    country_from_headers,
    currency_symbol,
    geo_from_country,
)


@pytest.mark.parametrize(
    'country,currency,symbol',
    [
        ('US', 'USD', '$'),
        ('IN', 'INR', '₹'),
        ('GB', 'GBP', '£'),
        ('CA', 'CAD', 'CA$'),
        ('AU', 'AUD', 'A$'),
        ('FR', 'EUR', '€'),
        ('JP', 'JPY', '¥'),
        ('CN', 'CNY', '¥'),
    ],
)
def test_geo_from_known_country(country, currency, symbol):
    geo = geo_from_country(country)

    assert geo.country == country
    assert geo.currency == currency
    assert geo.symbol == symbol


def test_geo_from_country_is_case_insensitive():
    assert geo_from_country('nl').currency == 'EUR'
    assert geo_from_country('nl').country == 'NL'


def test_unknown_country_defaults_to_usd():
    geo = geo_from_country('BR')

    assert geo.country == 'BR'
    assert geo.currency == 'USD'
    assert geo.symbol == '$'


def test_missing_country_defaults_to_us():
    geo = geo_from_country(None)

    assert geo.country == 'US'
    assert geo.currency == 'USD'


def test_currency_symbol_unknown_currency():
    assert currency_symbol('CHF') == '$'


def test_country_from_headers_prefers_vercel_header():
    headers = {'cf-ipcountry': 'GB', 'x-vercel-ip-country': 'in'}

    assert country_from_headers(headers) == 'IN'


def test_country_from_headers_falls_through_to_later_headers():
    assert country_from_headers({'x-appengine-country': 'jp'}) == 'JP'


def test_country_from_headers_rejects_malformed_code():
    assert country_from_headers({'cf-ipcountry': 'USA'}) is None


def test_country_from_headers_without_geo_headers():
    assert country_from_headers({'accept': 'application/json'}) is None
