"""
Shared test configuration and fixtures.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from domain.models.rates import ProviderRates

TEST_TTL_MS = 60 * 60 * 1000
SUPPORTED = ['USD', 'EUR', 'GBP', 'INR', 'CAD', 'AUD', 'JPY', 'CNY']

SAMPLE_RATES = {
    'USD': 1.0,
    'EUR': 0.92,
    'GBP': 0.78,
    'INR': 83.0,
    'CAD': 1.34,
    'AUD': 1.5,
    'JPY': 156.0,
    'CNY': 7.2,
    'CHF': 0.88,
}


class FakeClock:
    """Controllable millisecond clock"""
    def __init__(self, start: int = 1_760_781_600_000):
        self.current = start

    def __call__(self) -> int:
        return self.current

    def advance(self, ms: int) -> None:
        self.current += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_provider():
    """Factory for providers whose fetch_rates returns `rates` or raises `error`."""
    def _make(name: str, rates: dict | None = None, error: Exception | None = None, base: str = 'USD'):
        provider = Mock()
        provider.name = name
        if error is not None:
            provider.fetch_rates = AsyncMock(side_effect=error)
        else:
            provider.fetch_rates = AsyncMock(
                return_value=ProviderRates(provider=name, base=base, rates=dict(rates or SAMPLE_RATES))
            )
        provider.close = AsyncMock()
        return provider

    return _make


@pytest.fixture
def sample_rates():
    return dict(SAMPLE_RATES)


@pytest.fixture
def supported_currencies():
    return list(SUPPORTED)


@pytest.fixture
def rate_cache(clock):
    from infrastructure.cache.memory_cache import InMemoryRateCache

    return InMemoryRateCache(ttl_ms=TEST_TTL_MS, clock=clock)


@pytest.fixture
def build_service(rate_cache, clock):
    """Builds a RateService over the given providers sharing the fake clock."""
    from application.services.rate_service import RateService

    def _build(providers, **kwargs):
        return RateService(
            providers=providers,
            cache=rate_cache,
            supported_currencies=SUPPORTED,
            clock=clock,
            **kwargs,
        )

    return _build
