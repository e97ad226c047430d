import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential
from tenacity.wait import wait_base

from domain.exceptions.currency import ProviderError, ProviderUnavailableError
from domain.models.rates import ProviderRates, RateSnapshot
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.providers.base import ExchangeRateProvider, normalize_rates

logger = logging.getLogger(__name__)

FALLBACK_NOTE = 'All upstream providers failed; returning fallback rates.'

# Coarse USD-based rates served when every provider is down
DEFAULT_FALLBACK_RATES: dict[str, float] = {
    'USD': 1,
    'EUR': 0.92,
    'GBP': 0.78,
    'INR': 83,
    'CAD': 1.34,
    'AUD': 1.5,
    'JPY': 156,
    'CNY': 7.2,
}


class RateService:
    def __init__(
        self,
        providers: Sequence[ExchangeRateProvider],
        cache: InMemoryRateCache,
        supported_currencies: Sequence[str],
        fallback_rates: Mapping[str, float] | None = None,
        base_currency: str = 'USD',
        clock: Callable[[], int] | None = None,
        retry_attempts: int = 1,
        retry_wait: wait_base | None = None,
    ):
        self.providers = list(providers)
        self.cache = cache
        self.supported_currencies = [code.upper() for code in supported_currencies]
        self.fallback_rates = normalize_rates(DEFAULT_FALLBACK_RATES if fallback_rates is None else fallback_rates)
        self.base_currency = base_currency.upper()
        self.retry_attempts = max(1, retry_attempts)
        self._clock = clock or cache.now
        self._retry_wait = retry_wait or wait_exponential(multiplier=0.5, min=0.5, max=4)
        self._refresh_lock = asyncio.Lock()

    async def get_snapshot(self) -> RateSnapshot:
        cached = self.cache.get()
        if cached is not None:
            return cached

        async with self._refresh_lock:
            # another request may have refreshed while we waited
            cached = self.cache.get()
            if cached is not None:
                return cached

            snapshot = await self._sweep_providers()
            self.cache.put(snapshot)
            return snapshot

    def unavailable_snapshot(self, error: str) -> RateSnapshot:
        return RateSnapshot(
            base=self.base_currency,
            rates={code: None for code in self.supported_currencies},
            fetched_at=self._clock(),
            provider='none',
            error=error,
        )

    async def _fetch_from_provider(self, provider: ExchangeRateProvider) -> ProviderRates:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=self._retry_wait,
            retry=retry_if_exception_type(ProviderUnavailableError),
            reraise=True,
        ):
            with attempt:
                return await provider.fetch_rates()

    async def _sweep_providers(self) -> RateSnapshot:
        last_error: str | None = None

        for provider in self.providers:
            try:
                result = await self._fetch_from_provider(provider)
            except ProviderError as e:
                logger.warning(f'Provider {provider.name} failed: {e}')
                last_error = str(e)
                continue
            except Exception as e:
                logger.exception(f'Provider {provider.name} raised unexpectedly')
                last_error = f'{provider.name}: {e}'
                continue

            logger.info(f'Fetched {len(result.rates)} rates from {result.provider}')
            return RateSnapshot(
                base=result.base,
                rates=self._restrict(result.rates),
                fetched_at=self._clock(),
                provider=result.provider,
                error=None,
            )

        logger.error(f'exchange-rate: all providers failed: {last_error}')
        return RateSnapshot(
            base=self.base_currency,
            rates=self._restrict(self.fallback_rates),
            fetched_at=self._clock(),
            provider='fallback',
            error=last_error or 'No rate providers configured',
            note=FALLBACK_NOTE,
        )

    def _restrict(self, rates: Mapping[str, float]) -> dict[str, float | None]:
        return {code: rates.get(code) for code in self.supported_currencies}
