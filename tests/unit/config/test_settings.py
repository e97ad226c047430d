# nosec B101


import pytest

from api.dependencies import build_providers, cleanup_dependencies, deps, init_dependencies
from config.settings import Settings, get_settings
from infrastructure.providers import ErApiProvider, FrankfurterProvider

SETTING_NAMES = (
    'EXCHANGE_CACHE_TTL_MS',
    'RATE_PROVIDERS',
    'PROVIDER_TIMEOUT_SECONDS',
    'PROVIDER_RETRY_ATTEMPTS',
    'BASE_CURRENCY',
    'SUPPORTED_CURRENCIES',
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in SETTING_NAMES:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.EXCHANGE_CACHE_TTL_MS == 3_600_000
    assert settings.RATE_PROVIDERS == ['exchangerate.host', 'er-api', 'frankfurter']
    assert settings.PROVIDER_TIMEOUT_SECONDS == 7.0
    assert settings.PROVIDER_RETRY_ATTEMPTS == 1
    assert settings.BASE_CURRENCY == 'USD'
    assert settings.SUPPORTED_CURRENCIES == ['USD', 'EUR', 'GBP', 'INR', 'CAD', 'AUD', 'JPY', 'CNY']


def test_env_overrides(clean_env):
    clean_env.setenv('EXCHANGE_CACHE_TTL_MS', '120000')
    clean_env.setenv('RATE_PROVIDERS', '["frankfurter", "er-api"]')

    settings = Settings(_env_file=None)

    assert settings.EXCHANGE_CACHE_TTL_MS == 120_000
    assert settings.RATE_PROVIDERS == ['frankfurter', 'er-api']


@pytest.mark.asyncio
async def test_build_providers_follows_configured_order(clean_env):
    settings = Settings(_env_file=None, RATE_PROVIDERS=['frankfurter', 'er-api'], PROVIDER_TIMEOUT_SECONDS=2.5)

    providers = build_providers(settings)
    try:
        assert [provider.name for provider in providers] == ['frankfurter', 'er-api']
        assert isinstance(providers[0], FrankfurterProvider)
        assert isinstance(providers[1], ErApiProvider)
        assert all(provider.timeout == 2.5 for provider in providers)
    finally:
        for provider in providers:
            await provider.close()


def test_build_providers_rejects_unknown_name(clean_env):
    settings = Settings(_env_file=None, RATE_PROVIDERS=['fixer.io'])

    with pytest.raises(ValueError) as exc_info:
        build_providers(settings)

    assert "Unknown rate provider 'fixer.io'" in str(exc_info.value)


@pytest.mark.asyncio
async def test_init_dependencies_applies_env_settings(clean_env):
    clean_env.setenv('EXCHANGE_CACHE_TTL_MS', '90000')
    clean_env.setenv('RATE_PROVIDERS', '["er-api"]')
    clean_env.setenv('PROVIDER_RETRY_ATTEMPTS', '3')

    init_dependencies()
    try:
        assert deps.rate_cache.ttl_ms == 90_000
        assert deps.rate_cache.ttl_seconds == 90
        assert [provider.name for provider in deps.providers] == ['er-api']
        assert deps.rate_service.cache is deps.rate_cache
        assert deps.rate_service.retry_attempts == 3
    finally:
        await cleanup_dependencies()

    assert deps.rate_service is None
