import logging
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService, RateService
from config.settings import Settings, get_settings
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.providers import PROVIDER_CLASSES, ExchangeRateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	providers: list[ExchangeRateProvider] | None = None
	rate_cache: InMemoryRateCache | None = None
	rate_service: RateService | None = None


deps = AppDependencies()


def build_providers(settings: Settings) -> list[ExchangeRateProvider]:
	providers: list[ExchangeRateProvider] = []
	for name in settings.RATE_PROVIDERS:
		provider_cls = PROVIDER_CLASSES.get(name)
		if provider_cls is None:
			raise ValueError(f'Unknown rate provider {name!r}; expected one of {sorted(PROVIDER_CLASSES)}')
		providers.append(
			provider_cls(base_currency=settings.BASE_CURRENCY, timeout=settings.PROVIDER_TIMEOUT_SECONDS)
		)
	return providers


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.providers = build_providers(settings)
	deps.rate_cache = InMemoryRateCache(ttl_ms=settings.EXCHANGE_CACHE_TTL_MS)
	deps.rate_service = RateService(
		providers=deps.providers,
		cache=deps.rate_cache,
		supported_currencies=settings.SUPPORTED_CURRENCIES,
		base_currency=settings.BASE_CURRENCY,
		retry_attempts=settings.PROVIDER_RETRY_ATTEMPTS,
	)
	logger.info(f'Dependencies initialized with providers: {", ".join(p.name for p in deps.providers)}')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.providers:
		for provider in deps.providers:
			await provider.close()
	if deps.rate_cache:
		deps.rate_cache.clear()

	deps.providers = None
	deps.rate_cache = None
	deps.rate_service = None
	logger.info('Cleanup complete')


def get_rate_service() -> RateService:
	if deps.rate_service is None:
		raise RuntimeError('Rate service not initialized')
	return deps.rate_service


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service)
