from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Rate cache
	EXCHANGE_CACHE_TTL_MS: int = 60 * 60 * 1000

	# Upstream providers, tried in this order
	RATE_PROVIDERS: list[str] = ['exchangerate.host', 'er-api', 'frankfurter']
	PROVIDER_TIMEOUT_SECONDS: float = 7.0
	PROVIDER_RETRY_ATTEMPTS: int = 1

	BASE_CURRENCY: str = 'USD'
	SUPPORTED_CURRENCIES: list[str] = ['USD', 'EUR', 'GBP', 'INR', 'CAD', 'AUD', 'JPY', 'CNY']

	# Application
	APP_NAME: str = 'Incident Archive Exchange Rate API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
