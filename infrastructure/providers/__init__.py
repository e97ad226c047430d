from .base import BaseRatesProvider, ExchangeRateProvider, normalize_rates
from .er_api import ErApiProvider
from .exchangerate_host import ExchangerateHostProvider
from .frankfurter import FrankfurterProvider

PROVIDER_CLASSES: dict[str, type[BaseRatesProvider]] = {
    'exchangerate.host': ExchangerateHostProvider,
    'er-api': ErApiProvider,
    'frankfurter': FrankfurterProvider,
}

__all__ = [
    'BaseRatesProvider',
    'ErApiProvider',
    'ExchangeRateProvider',
    'ExchangerateHostProvider',
    'FrankfurterProvider',
    'PROVIDER_CLASSES',
    'normalize_rates',
]
