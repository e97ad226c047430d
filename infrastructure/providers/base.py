import math
from abc import ABC, abstractmethod
from typing import Any, Protocol

import httpx

from domain.exceptions.currency import ProviderError, ProviderUnavailableError
from domain.models.rates import ProviderRates


class ExchangeRateProvider(Protocol):
    @property
    def name(self) -> str: ...

    async def fetch_rates(self) -> ProviderRates: ...

    async def close(self) -> None: ...


def normalize_rates(raw: dict[str, Any]) -> dict[str, float]:
    """Keeps only finite, strictly positive numbers and uppercases the codes."""
    normalized: dict[str, float] = {}
    for code, value in raw.items():
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        try:
            number = float(value)
        except OverflowError:
            continue
        if not math.isfinite(number) or number <= 0:
            continue
        normalized[str(code).upper()] = number
    return normalized


class BaseRatesProvider(ABC):
    """A base class for rate providers, handling common HTTP logic."""

    BASE_URL: str = ''

    def __init__(
        self,
        base_currency: str = 'USD',
        client: httpx.AsyncClient | None = None,
        timeout: float = 7.0,
    ):
        self.base_currency = base_currency.upper()
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def _build_request(self) -> tuple[str, dict]:
        """Returns the url and query params for the latest-rates call."""
        ...

    def _check_payload(self, data: dict) -> None:
        """Hook for provider-specific error envelopes."""

    def _extract_base(self, data: dict) -> str:
        base = data.get('base')
        return base.upper() if isinstance(base, str) and base else self.base_currency

    async def _request(self) -> dict:
        url, params = self._build_request()
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(f'{self.name} HTTP error {e.response.status_code}') from e
        except httpx.RequestError as e:
            raise ProviderUnavailableError(f'{self.name} request failed: {e.__class__.__name__}') from e
        except ValueError as e:
            raise ProviderError(f'{self.name} response parsing error: {str(e)}') from e

        if not isinstance(data, dict):
            raise ProviderError(f'{self.name}: invalid json')

        self._check_payload(data)
        return data

    async def fetch_rates(self) -> ProviderRates:
        data = await self._request()

        raw_rates = data.get('rates')
        if not isinstance(raw_rates, dict):
            raise ProviderError(f'{self.name}: missing rates')

        rates = normalize_rates(raw_rates)
        if not rates:
            raise ProviderError(f'provider {self.name} returned no numeric rates')

        return ProviderRates(provider=self.name, base=self._extract_base(data), rates=rates)

    async def close(self) -> None:
        await self._client.aclose()
