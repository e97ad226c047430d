from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderRates:
    provider: str
    base: str
    rates: dict[str, float]


@dataclass(frozen=True)
class RateSnapshot:
    base: str
    rates: dict[str, float | None]
    fetched_at: int  # milliseconds since epoch
    provider: str
    error: str | None = None
    note: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.provider in ('fallback', 'none')

    def rate_for(self, currency: str) -> float | None:
        return self.rates.get(currency.upper())
